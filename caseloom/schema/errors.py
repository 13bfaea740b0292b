"""Errors raised for requests rejected before any pipeline stage runs."""

from pydantic import ValidationError


class RequestError(Exception):
    """Base class for malformed generation requests."""


class RequestLoadError(RequestError):
    """Raised when a request document cannot be read or is not a request."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)


class RequestValidationError(RequestError):
    """Raised when request data fails validation, e.g. a blank description.

    ``errors`` holds one ``{"loc", "msg", "type"}`` dict per problem.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "RequestValidationError":
        errors = [
            {
                "loc": ".".join(str(part) for part in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        return cls(f"Invalid request: {len(errors)} problem(s)", errors)

    def describe(self) -> list[str]:
        """One ``field: message`` line per problem."""
        return [f"{err['loc'] or 'request'}: {err['msg']}" for err in self.errors]
