# src/neutrino_api/core/classifier.py
"""
Response Classifier: status + content type -> Outcome.

Decision table, in precedence order:

1. 2xx + JSON                  -> JsonResult (even if an output file was requested)
                                  any JSON value passes, not only objects
2. 2xx + non-JSON + file path  -> FileResult, or API_GATEWAY_ERROR if the file is empty
3. 2xx + non-JSON, no path     -> API_GATEWAY_ERROR with the raw body
4. non-2xx + JSON error fields -> ErrorResult with the remote ``api-error`` code
5. non-2xx otherwise           -> API_GATEWAY_ERROR with the raw body

A body labeled JSON that does not parse raises InvalidJSONResponseError.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from .exceptions import InvalidJSONResponseError, OutputFileError
from .executor import RawResponse
from .outcome import ErrorCode, ErrorResult, FileResult, JsonResult, Outcome, is_success_status

JSON_CONTENT_TYPE = "application/json"

API_ERROR_FIELD = "api-error"
API_ERROR_MSG_FIELD = "api-error-msg"
API_PARAMETER_NAME_FIELD = "api-parameter-name"
API_PARAMETER_TYPE_FIELD = "api-parameter-type"

# api-error code for a failed parameter validation
INVALID_PARAMETER_ERROR = 1


def is_json_content_type(content_type: Optional[str]) -> bool:
    return bool(content_type) and JSON_CONTENT_TYPE in content_type.lower()


def _parse_json(raw: RawResponse) -> Any:
    try:
        return json.loads(raw.read_body())
    except ValueError as e:
        raise InvalidJSONResponseError(raw.http_status, raw.content_type) from e


def _output_file_error(file_path: Path, error: OSError) -> OutputFileError:
    return OutputFileError(str(file_path), error.strerror or str(error))


def _save_body(raw: RawResponse, file_path: Path) -> int:
    """
    Stream the body into ``file_path``.

    File errors (open, write, and the final flush on close) are wrapped in
    OutputFileError; transport errors raised while reading the stream
    propagate unchanged. A partially written regular file is removed.
    """
    try:
        f = open(file_path, "wb")
    except OSError as e:
        raise _output_file_error(file_path, e) from e

    written = 0
    try:
        try:
            for chunk in raw.iter_body():
                if not chunk:  # keep-alive
                    continue
                try:
                    f.write(chunk)
                except OSError as e:
                    raise _output_file_error(file_path, e) from e
                written += len(chunk)

            # the last buffered chunk is flushed here
            try:
                f.close()
            except OSError as e:
                raise _output_file_error(file_path, e) from e
        finally:
            if not f.closed:
                f.close()
    except Exception:
        if file_path.is_file():
            os.remove(file_path)
        raise

    return written


def _file_size(file_path: Path) -> int:
    try:
        return file_path.stat().st_size
    except OSError as e:
        raise _output_file_error(file_path, e) from e


def _api_error(raw: RawResponse, body: Any) -> Optional[ErrorResult]:
    """Build an ErrorResult from the remote error envelope, if present."""
    if not isinstance(body, dict):
        return None
    if API_ERROR_FIELD not in body or API_ERROR_MSG_FIELD not in body:
        return None

    try:
        error_code = int(body[API_ERROR_FIELD])
    except (TypeError, ValueError):
        return None

    message = str(body[API_ERROR_MSG_FIELD])
    if error_code == INVALID_PARAMETER_ERROR:
        message = "{}, Name: {}, Type: {}".format(
            message,
            body.get(API_PARAMETER_NAME_FIELD, ""),
            body.get(API_PARAMETER_TYPE_FIELD, ""),
        )

    return ErrorResult(
        http_status=raw.http_status,
        content_type=raw.content_type,
        error_code=error_code,
        error_message=message,
    )


def _gateway_error(raw: RawResponse, message: Optional[str] = None) -> ErrorResult:
    if message is None:
        message = raw.text or ErrorCode.API_GATEWAY_ERROR.message
    return ErrorResult.of(
        ErrorCode.API_GATEWAY_ERROR,
        http_status=raw.http_status,
        content_type=raw.content_type,
        message=message,
    )


def classify_response(raw: RawResponse, output_file_path: Optional[Path] = None) -> Outcome:
    """
    Decide which Outcome a response represents.

    A 2xx JSON body of any shape (object, array or scalar) becomes
    JsonResult.data as parsed; only non-2xx bodies are checked for the
    ``api-error`` envelope.

    Args:
        raw: Response from the executor (body not yet read)
        output_file_path: Where a non-JSON success body should be saved

    Returns:
        JsonResult, FileResult or ErrorResult

    Raises:
        InvalidJSONResponseError: body labeled JSON is not valid JSON
        OutputFileError: output file could not be opened or written
        requests.exceptions.RequestException: body stream failed mid-read
    """
    is_json = is_json_content_type(raw.content_type)

    if is_success_status(raw.http_status):
        if is_json:
            return JsonResult(
                http_status=raw.http_status,
                content_type=raw.content_type,
                data=_parse_json(raw),
            )

        if output_file_path is not None:
            file_path = Path(output_file_path)
            _save_body(raw, file_path)
            if _file_size(file_path) > 0:
                return FileResult(
                    http_status=raw.http_status,
                    content_type=raw.content_type,
                    file_path=file_path,
                )
            return _gateway_error(raw, message=f"{ErrorCode.API_GATEWAY_ERROR.message}: empty response body")

        return _gateway_error(raw)

    # Non-2xx
    if is_json:
        result = _api_error(raw, _parse_json(raw))
        if result is not None:
            return result

    return _gateway_error(raw)
