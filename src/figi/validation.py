"""Client-side checks run on every mapping request before it is sent."""

from __future__ import annotations

from collections.abc import Iterable

from figi.exceptions import (
    MissingIDError,
    MissingIDTypeError,
    MissingSecurityType2Error,
    NilRequestError,
)
from figi.models import AMBIGUOUS_ID_TYPES, IdentifierType, MappingRequest


def validate(request: MappingRequest | None) -> None:
    """Raise the first rule the request breaks; return None if it is sendable.

    Order: presence, idValue, idType, securityType2 for ambiguous types,
    then the identifier type range.
    """
    if request is None:
        raise NilRequestError()
    if not request.id_value:
        raise MissingIDError()
    if not request.id_type:
        raise MissingIDTypeError()
    if request.id_type in AMBIGUOUS_ID_TYPES and not request.security_type2:
        raise MissingSecurityType2Error(
            f"securityType2 is required when idType is {IdentifierType(request.id_type).name}"
        )
    if not IdentifierType.is_valid(request.id_type):
        raise MissingIDTypeError(f"missing ID type: {request.id_type!r} is not an identifier type")


def validate_all(requests: Iterable[MappingRequest | None]) -> None:
    """Validate a batch in order; the first bad request aborts the batch."""
    for request in requests:
        validate(request)
