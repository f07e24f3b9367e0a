"""
Conversion between response shapes.

A document fetched as ``GenericResponse`` can be reinterpreted as any typed
response with ``parse_as``. The source is serialized back to JSON and validated
against the target model, so unknown fields survive in the target's extras.
"""

import logging

from pydantic import ValidationError

from .errors import ParseError
from .models import PrimaryResponse

logger = logging.getLogger(__name__)


def serialize(response: PrimaryResponse, pretty: bool = False) -> str:
    """
    Render a response as JSON using the API's key names.

    Args:
        response: Any top-level response, typed or generic.
        pretty: Indent the output.

    Returns:
        JSON text. Fields absent from the source document are omitted and
        unknown fields are written back unchanged.
    """
    if not isinstance(response, PrimaryResponse):
        raise TypeError(f"Expected a PrimaryResponse, got {type(response).__name__}")
    return response.model_dump_json(by_alias=True, exclude_unset=True, indent=2 if pretty else None)


def parse_as[T: PrimaryResponse](model_cls: type[T], source: PrimaryResponse) -> T:
    """
    Reinterpret ``source`` as ``model_cls``.

    Raises:
        TypeError: If ``model_cls`` is not a response type or ``source`` is not a response.
        ParseError: If the document is missing or mistypes fields ``model_cls`` requires.
    """
    if not (isinstance(model_cls, type) and issubclass(model_cls, PrimaryResponse)):
        raise TypeError(f"{model_cls!r} is not a PrimaryResponse type")

    payload = serialize(source)
    try:
        return model_cls.from_json(payload)
    except ValidationError as e:
        logger.debug(f"{type(source).__name__} does not match {model_cls.__name__}: {e.error_count()} errors")
        raise ParseError(model_cls.__name__, e) from e
