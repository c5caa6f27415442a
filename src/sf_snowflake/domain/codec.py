"""Parse snowflake IDs from external representations.

Text form is an optional sign followed by 1-19 ASCII digits, nothing else:
no whitespace, no underscores, no "0x". Values must fit a signed int64.
"""

import base64
import binascii
import re

from src.sf_common.errors import ParseError
from src.sf_snowflake.domain.models import SnowflakeID

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_DECIMAL_RE = re.compile(r"[+-]?[0-9]{1,19}")  # int64 has at most 19 digits


def parse_int64(value: int) -> SnowflakeID:
    if not (_INT64_MIN <= value <= _INT64_MAX):
        raise ParseError(f"{value} is out of int64 range")
    return SnowflakeID(value)


def parse_string(text: str) -> SnowflakeID:
    if not _DECIMAL_RE.fullmatch(text):
        raise ParseError(f"{text!r} is not a decimal integer")
    return parse_int64(int(text))


def parse_bytes(data: bytes) -> SnowflakeID:
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as exc:
        raise ParseError("bytes are not ASCII decimal text") from exc
    return parse_string(text)


def parse_base64(text: str) -> SnowflakeID:
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ParseError(f"{text!r} is not valid base64") from exc
    return parse_bytes(data)
