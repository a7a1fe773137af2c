"""figi configuration, read from the environment."""

import os

from pydantic import BaseModel

PROD_URL = "https://api.openfigi.com"
API_KEY_HEADER = "X-OPENFIGI-APIKEY"


class OpenFIGIConfig(BaseModel):
    base_url: str = PROD_URL
    api_key: str = ""  # Without a key the service allows far fewer requests per minute
    timeout: float = 30.0  # seconds, per HTTP call


class AppConfig(BaseModel):
    openfigi: OpenFIGIConfig = OpenFIGIConfig()
    debug: bool = False


def _build_config() -> AppConfig:
    """Build config from environment variables."""
    return AppConfig(
        openfigi=OpenFIGIConfig(
            base_url=os.environ.get("OPENFIGI_BASE_URL", PROD_URL),
            api_key=os.environ.get("OPENFIGI_API_KEY", ""),
            timeout=float(os.environ.get("OPENFIGI_TIMEOUT", "30")),
        ),
        debug=os.environ.get("DEBUG", "").lower() in ("1", "true", "yes"),
    )


config = _build_config()
