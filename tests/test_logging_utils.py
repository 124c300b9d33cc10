from zensend.logging_utils import body_preview, mask_number, mask_numbers, mask_secret


def test_mask_number_keeps_prefix_and_last_digits():
    assert mask_number("447796351234") == "44*******234"


def test_mask_number_short_values_fully_hidden():
    assert mask_number("12345") == "*****"
    assert mask_number("") == ""


def test_mask_numbers_joins_in_order():
    assert mask_numbers(["447796351234", "447796351235"]) == "44*******234,44*******235"


def test_mask_secret():
    assert mask_secret("abcdefghij") == "ab...ij"
    assert mask_secret("abc") == "***"


def test_body_preview():
    assert body_preview("Hello") == "Hello"
    assert body_preview("x" * 30) == "x" * 20 + "... (30 chars)"
