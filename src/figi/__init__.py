"""figi — client for the OpenFIGI identifier mapping API.

    from figi import FigiClient, IdentifierType, MappingRequest

    client = FigiClient(api_key="...")
    rows = await client.mapping([MappingRequest(id_type=IdentifierType.TICKER, id_value="AAPL")])
"""

from __future__ import annotations

import logging

from figi.client import FigiClient
from figi.exceptions import (
    BadStatusError,
    DecodeError,
    FigiError,
    MappingAPIError,
    MappingWarningError,
    MissingIDError,
    MissingIDTypeError,
    MissingSecurityType2Error,
    NilRequestError,
    RequestBuildError,
    RequestTimeoutError,
    RequestValidationError,
    SerializationError,
    TransportError,
)
from figi.models import IdentifierType, MappingRequest, MappingResponse, OptionType
from figi.validation import validate

# Diagnostics are discarded unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BadStatusError",
    "DecodeError",
    "FigiClient",
    "FigiError",
    "IdentifierType",
    "MappingAPIError",
    "MappingRequest",
    "MappingResponse",
    "MappingWarningError",
    "MissingIDError",
    "MissingIDTypeError",
    "MissingSecurityType2Error",
    "NilRequestError",
    "OptionType",
    "RequestBuildError",
    "RequestTimeoutError",
    "RequestValidationError",
    "SerializationError",
    "TransportError",
    "validate",
]
