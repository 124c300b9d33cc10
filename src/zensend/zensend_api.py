import os
from typing import Any

from zensend.encoding import FORM_CONTENT_TYPE

DEFAULT_URL = "https://api.zensend.io"
API_KEY_HEADER = "X-API-KEY"


class ZenSendAPI:
    """Holds the credential and base URL shared by every request."""

    def __init__(self, api_key: str, url: str = DEFAULT_URL) -> None:
        self._api_key = api_key
        self._base_url = url

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, endpoint: str) -> str:
        # plain concatenation keeps any path prefix on the base URL
        return f"{self._base_url.rstrip('/')}{endpoint}"

    @property
    def headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self._api_key}

    def form_headers(self) -> dict[str, str]:
        return {**self.headers, "Content-Type": FORM_CONTENT_TYPE}

    @staticmethod
    def settings_from_env() -> dict[str, Any]:
        """Read client settings from ZENSEND_* environment variables.

        ZENSEND_API_KEY is required; ZENSEND_URL and ZENSEND_TIMEOUT are optional.
        """
        try:
            api_key = os.environ["ZENSEND_API_KEY"]
        except KeyError:
            raise KeyError("ZENSEND_API_KEY is not set") from None

        settings: dict[str, Any] = {
            "api_key": api_key,
            "url": os.getenv("ZENSEND_URL", DEFAULT_URL),
        }
        timeout = os.getenv("ZENSEND_TIMEOUT")
        if timeout:
            settings["timeout"] = float(timeout)
        return settings
