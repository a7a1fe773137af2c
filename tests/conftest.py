import pytest

from figi.models import IdentifierType, MappingRequest


@pytest.fixture
def aapl_request() -> MappingRequest:
    return MappingRequest(id_type=IdentifierType.TICKER, id_value="AAPL")


@pytest.fixture
def msft_request() -> MappingRequest:
    return MappingRequest(id_type=IdentifierType.TICKER, id_value="MSFT", exchange_code="US")


@pytest.fixture
def two_slot_response() -> list[dict]:
    return [
        {"data": [{"figi": "BBG000BLNNH6", "ticker": "AAPL"}]},
        {"data": [{"figi": "BBG000BVPV84", "ticker": "MSFT"}]},
    ]
