"""Exceptions raised by cdg_client."""

import re

_API_KEY_RE = re.compile(r"(api_key=)[^&]*")


def redact(url: str) -> str:
    """Mask the api_key query value in a URL."""
    return _API_KEY_RE.sub(r"\1***", url)


class CongressAPIError(Exception):
    """Base class for all cdg_client errors."""


class ConfigError(CongressAPIError, ValueError):
    """Missing or invalid configuration, e.g. no API key."""


class ApiError(CongressAPIError):
    """A fetch failed."""


class HttpError(ApiError):
    """Transport failure or non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        self.status_code = status_code
        self.url = redact(url) if url else url
        if status_code is not None:
            message = f"[{status_code}] {message}"
        super().__init__(message)


class DeserializationError(ApiError):
    """The response body did not match the requested model."""

    def __init__(self, model_name: str, detail: str):
        self.model_name = model_name
        self.detail = detail
        super().__init__(f"Could not deserialize response as {model_name}: {detail}")


class ParseError(CongressAPIError):
    """A document could not be reconciled with the requested response shape."""

    def __init__(self, model_name: str, cause: Exception):
        self.model_name = model_name
        self.cause = cause
        super().__init__(f"Document does not match {model_name}: {cause}")
