ERRORS = {
  "E_EMPTY_BUFFER": "Buffer shorter than one record header",
  "E_NOT_ILDA": "Buffer does not start with an ILDA header",
  "E_UNSUPPORTED_VERSION": "Record format version not supported",
  "E_TRUNCATED_HEADER": "Record header runs past end of buffer",
  "E_TRUNCATED_PAYLOAD": "Partial trailing entry dropped from record payload",
  "E_READ_FAILED": "Could not read input file",
}
