"""UUID utilities for neo-docs."""

import time
import uuid
from typing import Any


def generate_uuid_v7() -> str:
    """
    Generate a UUIDv7 with time-based ordering.

    Time-ordered identifiers keep record inserts index friendly and sort
    in creation order.

    Returns:
        String representation of UUIDv7
    """
    # 48-bit millisecond timestamp
    timestamp_bytes = int(time.time() * 1000).to_bytes(6, byteorder="big")

    # 80 random bits for the rest
    uuid_bytes = timestamp_bytes + uuid.uuid4().bytes[6:]

    # Version 7 in the high nibble of byte 6
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0F) | 0x70]) + uuid_bytes[7:]

    # RFC 4122 variant in byte 8
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3F) | 0x80]) + uuid_bytes[9:]

    return str(uuid.UUID(bytes=uuid_bytes))


def is_valid_uuid(value: Any) -> bool:
    """
    Check if a value is a canonical UUID string or a UUID instance.

    Args:
        value: Value to check

    Returns:
        True if value is a valid UUID
    """
    if isinstance(value, uuid.UUID):
        return True
    if not isinstance(value, str) or len(value) != 36:
        return False
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False
