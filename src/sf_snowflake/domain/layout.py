"""Snowflake bit layout.

Layout (64-bit signed int, most to least significant):
  -  1 bit : unused sign bit, always 0
  - 41 bits: milliseconds since epoch
  - 10 bits: node id (0-1023)
  - 12 bits: sequence within the same millisecond (0-4095)

Packing is pure shift/OR, so compose(*decompose(v)) == v for any
identifier the generator produces.
"""

from src.sf_snowflake.domain.models import IdParts

NODE_BITS = 10
SEQUENCE_BITS = 12
TIMESTAMP_BITS = 63 - NODE_BITS - SEQUENCE_BITS

MAX_NODE_ID = (1 << NODE_BITS) - 1  # 1023
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1  # 4095
MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1

NODE_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = NODE_BITS + SEQUENCE_BITS

# 2024-09-10T15:17:00Z
DEFAULT_EPOCH_MS = 1_725_981_420_000


def compose(timestamp_ms: int, node_id: int, sequence: int) -> int:
    return (timestamp_ms << TIMESTAMP_SHIFT) | (node_id << NODE_SHIFT) | sequence


def decompose(value: int) -> IdParts:
    return IdParts(
        timestamp_ms=value >> TIMESTAMP_SHIFT,
        node_id=(value >> NODE_SHIFT) & MAX_NODE_ID,
        sequence=value & MAX_SEQUENCE,
    )
