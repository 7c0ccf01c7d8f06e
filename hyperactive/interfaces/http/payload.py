"""Request body decoding."""

from typing import TypeVar

from pydantic import TypeAdapter, ValidationError
from starlette.requests import Request

from hyperactive.domain.errors import InvalidPayloadError

T = TypeVar("T")


async def get_payload(request: Request, model: type[T]) -> T:
    """Read the whole request body and decode it as JSON into ``model``.

    Args:
        request: The incoming request. Its body is consumed.
        model: A pydantic model or any type pydantic can validate.

    Returns:
        The validated payload.

    Raises:
        InvalidPayloadError: If the body is not valid JSON for ``model``.
    """
    body = await request.body()
    try:
        return TypeAdapter(model).validate_json(body)
    except ValidationError as exc:
        raise InvalidPayloadError(exc) from exc
