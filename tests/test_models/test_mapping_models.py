"""Tests for the mapping request/response models and enumerations."""

import json

import pytest
from pydantic import ValidationError

from figi.models import (
    BatchSlot,
    IdentifierType,
    MappingRequest,
    MappingResponse,
    OptionType,
)


# ---------------------------------------------------------------------------
# IdentifierType
# ---------------------------------------------------------------------------

def test_identifier_type_has_all_openfigi_kinds():
    """The enumeration holds the sentinel plus 26 OpenFIGI types."""
    assert len(IdentifierType) == 27
    assert IdentifierType.UNSPECIFIED == 0
    assert IdentifierType.TICKER.name == "TICKER"
    assert IdentifierType.VENDOR_INDEX_CODE == 26


@pytest.mark.parametrize("member", [m for m in IdentifierType if m is not IdentifierType.UNSPECIFIED])
def test_every_real_identifier_type_is_valid(member):
    """Every non-sentinel member is valid and described."""
    assert IdentifierType.is_valid(member)
    assert member.description


@pytest.mark.parametrize("value", [IdentifierType.UNSPECIFIED, 0, 27, 255, -1, "TICKER", None, True])
def test_is_valid_rejects_sentinel_and_out_of_range(value):
    """The validity check rejects the sentinel, unknown values and bools."""
    assert not IdentifierType.is_valid(value)


def test_parse_accepts_name_number_and_member():
    """parse resolves names (any case), digit strings, ints and members."""
    assert IdentifierType.parse("ID_ISIN") is IdentifierType.ID_ISIN
    assert IdentifierType.parse("ticker") is IdentifierType.TICKER
    assert IdentifierType.parse("6") is IdentifierType.ID_CUSIP
    assert IdentifierType.parse(19) is IdentifierType.BASE_TICKER
    assert IdentifierType.parse(IdentifierType.OCC_SYMBOL) is IdentifierType.OCC_SYMBOL


def test_parse_unknown_name_raises():
    """parse rejects unknown names."""
    with pytest.raises(ValueError, match="unknown identifier type"):
        IdentifierType.parse("NOT_A_TYPE")


# ---------------------------------------------------------------------------
# MappingRequest
# ---------------------------------------------------------------------------

def test_request_accepts_wire_keys():
    """Requests can be built from camelCase wire keys."""
    req = MappingRequest.model_validate({"idType": "ID_ISIN", "idValue": "US0378331005", "exchCode": "US"})
    assert req.id_type is IdentifierType.ID_ISIN
    assert req.id_value == "US0378331005"
    assert req.exchange_code == "US"


def test_request_keeps_out_of_range_type_for_validation():
    """Unknown integer idTypes are kept raw for the validator."""
    req = MappingRequest(id_type=99, id_value="X")
    assert req.id_type == 99
    assert not isinstance(req.id_type, IdentifierType)


def test_request_keeps_bool_type_for_validation():
    """A bool idType is kept raw instead of becoming ID_ISIN."""
    req = MappingRequest(id_type=True, id_value="X")
    assert req.id_type is True
    assert not IdentifierType.is_valid(req.id_type)


def test_request_rejects_unknown_type_name():
    """Unknown idType names fail at construction."""
    with pytest.raises(ValidationError):
        MappingRequest(id_type="NOPE", id_value="X")


def test_payload_omits_unset_fields():
    """Unset optional fields are absent from the payload."""
    req = MappingRequest(id_type=IdentifierType.TICKER, id_value="AAPL")
    assert req.to_payload() == {"idType": "TICKER", "idValue": "AAPL"}


def test_payload_omits_empty_strings_and_unspecified_option():
    """Empty strings and an unspecified option type are not sent."""
    req = MappingRequest(
        id_type=IdentifierType.TICKER,
        id_value="AAPL",
        exchange_code="",
        option_type=OptionType.UNSPECIFIED,
    )
    payload = req.to_payload()
    assert "exchCode" not in payload
    assert "optionType" not in payload
    assert None not in payload.values()


def test_payload_uses_camel_case_keys():
    """Every field is sent under its OpenFIGI key."""
    req = MappingRequest(
        id_type=IdentifierType.BASE_TICKER,
        id_value="IBM",
        exchange_code="US",
        mic_code="XNYS",
        currency="USD",
        market_sector="Equity",
        security_type="Common Stock",
        security_type2="Common Stock",
        include_unlisted_equities=False,
        option_type=OptionType.PUT,
    )
    assert req.to_payload() == {
        "idType": "BASE_TICKER",
        "idValue": "IBM",
        "exchCode": "US",
        "micCode": "XNYS",
        "currency": "USD",
        "marketSecDes": "Equity",
        "securityType": "Common Stock",
        "securityType2": "Common Stock",
        "includeUnlistedEquities": False,
        "optionType": "Put",
    }


def test_payload_survives_json_and_back():
    """Encoding to JSON and decoding back preserves the set fields."""
    req = MappingRequest(
        id_type=IdentifierType.OPRA_SYMBOL,
        id_value="AAPL  250117C00150000",
        currency="USD",
        option_type=OptionType.CALL,
    )
    encoded = json.dumps(req.to_payload())
    decoded = json.loads(encoded)
    assert set(decoded) == {"idType", "idValue", "currency", "optionType"}
    assert MappingRequest.model_validate(decoded) == req


# ---------------------------------------------------------------------------
# MappingResponse / BatchSlot
# ---------------------------------------------------------------------------

def test_response_reads_wire_keys_and_ignores_extras():
    """Responses read wire keys, ignore unknown keys and dump without nulls."""
    resp = MappingResponse.model_validate({
        "figi": "BBG000BLNNH6",
        "ticker": "AAPL",
        "exchCode": "US",
        "compositeFIGI": "BBG000B9XRY4",
        "uniqueIDFutOpt": None,
        "exchDesc": "not modelled",
    })
    assert resp.exchange_code == "US"
    assert resp.composite_figi == "BBG000B9XRY4"
    assert resp.to_dict() == {
        "figi": "BBG000BLNNH6",
        "ticker": "AAPL",
        "exchCode": "US",
        "compositeFIGI": "BBG000B9XRY4",
    }


def test_batch_slot_defaults():
    """A slot with only a warning has no data and no error."""
    slot = BatchSlot.model_validate({"warning": "No identifier found."})
    assert slot.data is None
    assert not slot.error
    assert slot.warning == "No identifier found."
