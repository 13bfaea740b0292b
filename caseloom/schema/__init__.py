"""Schema layer for generation requests."""

from .errors import RequestError, RequestLoadError, RequestValidationError
from .loader import parse_request, parse_request_data, parse_request_text
from .models import GenerationOptions, GenerationRequest

__all__ = [
    "RequestError",
    "RequestLoadError",
    "RequestValidationError",
    "GenerationOptions",
    "GenerationRequest",
    "parse_request",
    "parse_request_data",
    "parse_request_text",
]
