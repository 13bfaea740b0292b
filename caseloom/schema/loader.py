"""Read generation requests from YAML documents.

A request document is either a mapping with a ``description`` and optional
``options``, or a bare scalar that is itself the description::

    description: Users can upload files up to 10MB
    options:
      includeSecurity: false
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import RequestLoadError, RequestValidationError
from .models import GenerationRequest


def _as_request_data(document, source: str | None) -> dict:
    """Normalize a parsed YAML document into request data."""
    if document is None:
        return {}
    if isinstance(document, dict):
        return document
    if isinstance(document, (str, int, float)) and not isinstance(document, bool):
        return {"description": str(document)}
    raise RequestLoadError(
        f"Expected a description or a mapping, got {type(document).__name__}", source
    )


def parse_request_text(text: str, source: str | None = None) -> GenerationRequest:
    """Parse a YAML request document.

    Args:
        text: The YAML content.
        source: Where the text came from, for error messages.

    Raises:
        RequestLoadError: If the YAML is invalid or of the wrong shape.
        RequestValidationError: If the request data is invalid.
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RequestLoadError(f"Invalid YAML: {e}", source) from e

    return parse_request_data(_as_request_data(document, source))


def parse_request(path: str | Path) -> GenerationRequest:
    """Read and parse a YAML request file.

    Raises:
        RequestLoadError: If the file is missing, unreadable or malformed.
        RequestValidationError: If the request data is invalid.
    """
    path = Path(path)
    if not path.is_file():
        raise RequestLoadError(f"No request file at {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RequestLoadError(f"Cannot read request file: {e}", str(path)) from e

    return parse_request_text(text, source=str(path))


def parse_request_data(data: dict) -> GenerationRequest:
    """Validate raw request data into a GenerationRequest.

    Raises:
        RequestValidationError: If the data fails validation.
    """
    try:
        return GenerationRequest.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError.from_pydantic(e) from e
