"""Decoder error taxonomy.

EmptyBuffer and NotAnIldaFile abort a decode. UnsupportedVersion and
TruncatedHeader only ever reach the caller as diagnostics.
"""
from __future__ import annotations

from .const import ERRORS


class IldaError(ValueError):
    code = "E_NOT_ILDA"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        msg = ERRORS[self.code]
        super().__init__(f"{msg}: {detail}" if detail else msg)

    def to_diagnostic(self, offset: int | None = None) -> dict:
        diag = {"code": self.code, "message": ERRORS[self.code]}
        if offset is not None:
            diag["offset"] = offset
        if self.detail:
            diag["detail"] = self.detail
        return diag


class ReadFailed(IldaError):
    code = "E_READ_FAILED"


class EmptyBuffer(IldaError):
    code = "E_EMPTY_BUFFER"


class NotAnIldaFile(IldaError):
    code = "E_NOT_ILDA"


class UnsupportedVersion(IldaError):
    code = "E_UNSUPPORTED_VERSION"

    def __init__(self, tag: int):
        self.tag = tag
        super().__init__(f"version {tag}")

    def to_diagnostic(self, offset: int | None = None) -> dict:
        diag = super().to_diagnostic(offset)
        diag["version"] = self.tag
        return diag


class TruncatedHeader(IldaError):
    code = "E_TRUNCATED_HEADER"
