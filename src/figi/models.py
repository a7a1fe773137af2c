"""Data models for the OpenFIGI mapping API."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidatorFunctionWrapHandler,
    field_serializer,
    field_validator,
)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class IdentifierType(IntEnum):
    """Kind of identifier being looked up. Sent on the wire by name."""

    UNSPECIFIED = 0
    ID_ISIN = 1
    ID_BB_UNIQUE = 2
    ID_SEDOL = 3
    ID_COMMON = 4
    ID_WERTPAPIER = 5
    ID_CUSIP = 6
    ID_CINS = 7
    ID_BB = 8
    ID_BB_8_CHR = 9
    ID_TRACE = 10
    ID_ITALY = 11
    ID_EXCH_SYMBOL = 12
    ID_FULL_EXCHANGE_SYMBOL = 13
    COMPOSITE_ID_BB_GLOBAL = 14
    ID_BB_GLOBAL_SHARE_CLASS_LEVEL = 15
    ID_BB_GLOBAL = 16
    ID_BB_SEC_NUM_DES = 17
    TICKER = 18
    BASE_TICKER = 19
    ID_CUSIP_8_CHR = 20
    OCC_SYMBOL = 21
    UNIQUE_ID_FUT_OPT = 22
    OPRA_SYMBOL = 23
    TRADING_SYSTEM_IDENTIFIER = 24
    ID_SHORT_CODE = 25
    VENDOR_INDEX_CODE = 26

    @property
    def description(self) -> str:
        return _ID_TYPE_DESCRIPTIONS[self]

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """True for any real identifier type; False for UNSPECIFIED and unknown values."""
        if isinstance(value, bool):
            return False
        try:
            member = cls(value)
        except (ValueError, TypeError):
            return False
        return member is not cls.UNSPECIFIED

    @classmethod
    def parse(cls, value: Any) -> IdentifierType:
        """Resolve a member from a member, its name or its integer value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if name.isdigit():
                return cls(int(name))
            raise ValueError(f"unknown identifier type: {value!r}")
        return cls(value)


_ID_TYPE_DESCRIPTIONS: dict[IdentifierType, str] = {
    IdentifierType.UNSPECIFIED: "Unspecified",
    IdentifierType.ID_ISIN: "ISIN - International Securities Identification Number",
    IdentifierType.ID_BB_UNIQUE: "Unique Bloomberg Identifier - a legacy, internal Bloomberg identifier",
    IdentifierType.ID_SEDOL: "Sedol Number - Stock Exchange Daily Official List",
    IdentifierType.ID_COMMON: "Common Code - a nine digit identification number",
    IdentifierType.ID_WERTPAPIER: "Wertpapierkennnummer/WKN - German securities identification code",
    IdentifierType.ID_CUSIP: "CUSIP - Committee on Uniform Securities Identification Procedures",
    IdentifierType.ID_CINS: "CINS - CUSIP International Numbering System",
    IdentifierType.ID_BB: "A legacy Bloomberg identifier",
    IdentifierType.ID_BB_8_CHR: "A legacy Bloomberg identifier (8 characters only)",
    IdentifierType.ID_TRACE: "Trace eligible bond identifier issued by FINRA",
    IdentifierType.ID_ITALY: "Italian Identifier Number - five or six digits",
    IdentifierType.ID_EXCH_SYMBOL: "Local Exchange Security Symbol",
    IdentifierType.ID_FULL_EXCHANGE_SYMBOL: (
        "Full Exchange Symbol - exchange symbol for futures, options and indices "
        "inclusive of base symbol and other security elements"
    ),
    IdentifierType.COMPOSITE_ID_BB_GLOBAL: (
        "Composite FIGI - links multiple FIGIs at the trading venue level "
        "within the same country or market"
    ),
    IdentifierType.ID_BB_GLOBAL_SHARE_CLASS_LEVEL: (
        "Share Class FIGI - links multiple Composite FIGIs for the same "
        "instrument across countries"
    ),
    IdentifierType.ID_BB_GLOBAL: (
        "Financial Instrument Global Identifier (FIGI) - unique to an "
        "individual instrument, never reassigned"
    ),
    IdentifierType.ID_BB_SEC_NUM_DES: (
        "Security ID Number Description - similar to the ticker field, "
        "with additional metadata"
    ),
    IdentifierType.TICKER: "Ticker - identifier reflecting common usage",
    IdentifierType.BASE_TICKER: (
        "Base Ticker - an indistinct identifier which may be linked to "
        "multiple instruments"
    ),
    IdentifierType.ID_CUSIP_8_CHR: "CUSIP (8 characters only)",
    IdentifierType.OCC_SYMBOL: "OCC Symbol - twenty-one character U.S. option symbol",
    IdentifierType.UNIQUE_ID_FUT_OPT: "Unique Identifier for Future Option - Bloomberg unique ticker",
    IdentifierType.OPRA_SYMBOL: "OPRA Symbol - U.S. option symbol standardized by OPRA",
    IdentifierType.TRADING_SYSTEM_IDENTIFIER: "Trading System Identifier - as used on the source trading system",
    IdentifierType.ID_SHORT_CODE: "Short Code - exchange venue specific code for Asian fixed income",
    IdentifierType.VENDOR_INDEX_CODE: "Vendor Index Code - assigned by the index provider",
}

# These identify several instruments unless narrowed by securityType2
AMBIGUOUS_ID_TYPES = frozenset({IdentifierType.BASE_TICKER, IdentifierType.ID_EXCH_SYMBOL})


class OptionType(str, Enum):
    UNSPECIFIED = ""
    CALL = "Call"
    PUT = "Put"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

_ALWAYS_SENT = ("idType", "idValue")


class MappingRequest(BaseModel):
    """One mapping job. Attribute names or camelCase wire keys are accepted."""

    model_config = ConfigDict(populate_by_name=True)

    # Unknown integers are kept as-is so validation can reject them
    id_type: IdentifierType | int = Field(
        IdentifierType.UNSPECIFIED, alias="idType", union_mode="left_to_right",
    )
    id_value: str = Field("", alias="idValue")
    exchange_code: str | None = Field(None, alias="exchCode")
    mic_code: str | None = Field(None, alias="micCode")
    currency: str | None = None
    market_sector: str | None = Field(None, alias="marketSecDes")
    security_type: str | None = Field(None, alias="securityType")
    security_type2: str | None = Field(None, alias="securityType2")
    include_unlisted_equities: bool | None = Field(None, alias="includeUnlistedEquities")
    option_type: OptionType | None = Field(None, alias="optionType")

    @field_validator("id_type", mode="wrap")
    @classmethod
    def _coerce_id_type(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        # bool is an int subclass; keep it raw so validation rejects it
        if isinstance(value, bool):
            return value
        if value is None:
            return IdentifierType.UNSPECIFIED
        try:
            value = IdentifierType.parse(value)
        except (ValueError, TypeError):
            pass
        return handler(value)

    @field_serializer("id_type")
    def _serialize_id_type(self, value: IdentifierType | int) -> str | int:
        return value.name if isinstance(value, IdentifierType) else value

    def to_payload(self) -> dict[str, Any]:
        """Wire form: camelCase keys, empty optional fields left out."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {
            key: value for key, value in payload.items()
            if key in _ALWAYS_SENT or value != ""
        }


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class MappingResponse(BaseModel):
    """One FIGI record returned for a mapping job."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    figi: str | None = None
    security_type: str | None = Field(None, alias="securityType")
    market_sector: str | None = Field(None, alias="marketSector")
    ticker: str | None = None
    name: str | None = None
    unique_id: str | None = Field(None, alias="uniqueID")
    exchange_code: str | None = Field(None, alias="exchCode")
    share_class_figi: str | None = Field(None, alias="shareClassFIGI")
    composite_figi: str | None = Field(None, alias="compositeFIGI")
    security_type2: str | None = Field(None, alias="securityType2")
    security_description: str | None = Field(None, alias="securityDescription")
    unique_id_future_option: str | None = Field(None, alias="uniqueIDFutOpt")

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)


class BatchSlot(BaseModel):
    """Positional result for one job of a batch: data, error or warning."""

    data: list[MappingResponse] | None = None
    error: str | None = None
    warning: str | None = None
