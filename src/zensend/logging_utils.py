"""Helpers that keep destination numbers and API keys out of log lines."""

from typing import Iterable

BODY_PREVIEW_LEN = 20


def mask_number(number: str) -> str:
    # 447796351234 -> 44*******234
    if len(number) <= 5:
        return "*" * len(number)
    return number[:2] + "*" * (len(number) - 5) + number[-3:]


def mask_numbers(numbers: Iterable[str]) -> str:
    return ",".join(mask_number(n) for n in numbers)


def mask_secret(secret: str) -> str:
    if len(secret) <= 6:
        return "***"
    return f"{secret[:2]}...{secret[-2:]}"


def body_preview(body: str) -> str:
    if len(body) <= BODY_PREVIEW_LEN:
        return body
    return f"{body[:BODY_PREVIEW_LEN]}... ({len(body)} chars)"
