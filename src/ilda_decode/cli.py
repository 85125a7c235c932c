import json
from pathlib import Path
import click
from .errors import IldaError, ReadFailed
from .decoder import decode_all

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

def load_bytes(path: Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ReadFailed(f"{path}: {e.strerror or e}") from e

def inspect_file(path: Path, include_points: bool = False) -> dict:
    try:
        result = decode_all(load_bytes(path))
    except IldaError as e:
        errors = [e.to_diagnostic()]
        return {"status":"FAIL","error_count":len(errors),"errors":errors}
    return result.to_dict(include_points)

@click.group()
def main():
    pass

@main.command("inspect")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--points", is_flag=True, help="Include every point and palette colour in the output")
def inspect_cmd(path: Path, points: bool):
    result = inspect_file(path, include_points=points)
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
