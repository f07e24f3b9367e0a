import logging

import httpx
from pydantic import ValidationError

from .config import get_settings
from .encoder import build_url
from .endpoints import Endpoint
from .errors import ConfigError, DeserializationError, HttpError, redact
from .models import GenericResponse, PrimaryResponse

logger = logging.getLogger(__name__)


class CongressClient:
    """Client for the Congress.gov v3 API."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Args:
            api_key: API key. If not provided, read from CDG_API_KEY (environment or .env).
            base_url: Override the API base URL.
            http_client: Preconfigured httpx client. The caller keeps ownership of it.
        """
        config = get_settings()
        self.api_key = api_key or config.api_key

        if not self.api_key:
            raise ConfigError(
                "CDG_API_KEY environment variable not set. Alternatively, provide an API key as an argument."
            )

        self.base_url = base_url or config.base_url
        self._owns_client = http_client is None
        self.client = http_client or httpx.Client(timeout=config.timeout, follow_redirects=True)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._owns_client:
            self.client.close()

    def url_for(self, endpoint: Endpoint) -> str:
        """Full request URL for an endpoint, including the API key."""
        return build_url(endpoint, self.api_key, self.base_url)

    def fetch[T: PrimaryResponse](self, endpoint: Endpoint, response_model: type[T] = GenericResponse) -> T:
        """
        Perform a single GET request and deserialize the body.

        Args:
            endpoint: What to request.
            response_model: Response type to deserialize into. Defaults to GenericResponse.

        Returns:
            An instance of ``response_model``.

        Raises:
            HttpError: On transport failure or a non-2xx status.
            DeserializationError: If the body does not match ``response_model``.
        """
        if not (isinstance(response_model, type) and issubclass(response_model, PrimaryResponse)):
            raise TypeError(f"{response_model!r} is not a PrimaryResponse type")

        url = self.url_for(endpoint)
        logger.debug(
            f"GET {redact(url)}",
            extra={"props": {"endpoint": type(endpoint).__name__, "model": response_model.__name__}},
        )

        # httpx errors carry the unredacted URL, so they are not chained
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error: {status} - {redact(url)}")
            raise HttpError(_error_message(e.response), status_code=status, url=url) from None
        except httpx.RequestError as e:
            logger.error(f"API request failed: {e.__class__.__name__} - {redact(url)}")
            raise HttpError(f"Request failed: {e.__class__.__name__}", url=url) from None

        try:
            return response_model.from_json(response.content)
        except ValidationError as e:
            logger.error(f"Failed to deserialize {response_model.__name__}: {e.error_count()} errors")
            raise DeserializationError(response_model.__name__, str(e)) from e


def _error_message(response: httpx.Response) -> str:
    reason = response.reason_phrase or "HTTP error"
    body = response.text.strip()
    if body:
        return f"{reason}: {redact(body[:500])}"
    return reason
