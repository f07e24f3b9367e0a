"""Congress.gov API client package."""

from cdg_client.client import CongressClient
from cdg_client.encoder import BASE_URL, append_api_key, build_url, encode
from cdg_client.errors import (
    ApiError,
    ConfigError,
    CongressAPIError,
    DeserializationError,
    HttpError,
    ParseError,
)
from cdg_client.models import GenericResponse, PrimaryResponse
from cdg_client.pagination import fetch_all
from cdg_client.parameters import Parameters
from cdg_client.reconcile import parse_as, serialize

__all__ = [
    # Client
    "CongressClient",
    "fetch_all",
    # Encoding
    "BASE_URL",
    "Parameters",
    "append_api_key",
    "build_url",
    "encode",
    # Responses
    "GenericResponse",
    "PrimaryResponse",
    "parse_as",
    "serialize",
    # Errors
    "ApiError",
    "ConfigError",
    "CongressAPIError",
    "DeserializationError",
    "HttpError",
    "ParseError",
]
