from typing import Iterable
from urllib.parse import quote_plus

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_params(*pairs: tuple[str, str | None]) -> list[tuple[str, str]]:
    """Keep the given order and drop every pair whose value is None."""
    return [(key, value) for key, value in pairs if value is not None]


def encode_params(params: Iterable[tuple[str, str]]) -> str:
    return "&".join(
        f"{quote_plus(key, safe='')}={quote_plus(value, safe='')}"
        for key, value in params
    )
