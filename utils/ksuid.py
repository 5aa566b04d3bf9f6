"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: [prefix] + 4 bytes timestamp + 16 bytes random = prefix + 27 char base62 string.
"""

import os
import struct
import time

from utils.base62 import BODY_LENGTH, MalformedIdentifier, decode, encode
from utils.timestamp import from_epoch_seconds, format_seconds

# KSUID epoch: 2014-05-13T16:53:20Z
KSUID_EPOCH = 1400000000
TIMESTAMP_BYTES = 4
PAYLOAD_BYTES = 16


def generate_ksuid(prefix=""):
    """Generate a sortable unique ID, optionally prefixed (no separator added)."""
    # 4 bytes: seconds since KSUID epoch
    timestamp = int(time.time()) - KSUID_EPOCH
    ts_bytes = struct.pack(">I", timestamp)

    # 16 bytes: random
    random_bytes = os.urandom(PAYLOAD_BYTES)

    return f"{prefix}{encode(ts_bytes + random_bytes)}"


def split_ksuid(value):
    """Split an identifier into (prefix, body); the body is always the last 27 chars."""
    if len(value) < BODY_LENGTH:
        raise MalformedIdentifier(f"identifier shorter than {BODY_LENGTH} characters: {value!r}")
    return value[:-BODY_LENGTH], value[-BODY_LENGTH:]


class KsuidParts:
    __slots__ = ("prefix", "body", "timestamp", "payload")

    def __init__(self, prefix, body, timestamp, payload):
        self.prefix = prefix
        self.body = body
        self.timestamp = timestamp
        self.payload = payload

    @property
    def datetime(self):
        return from_epoch_seconds(self.timestamp)

    def to_dict(self):
        return {"prefix": self.prefix,
                "body": self.body,
                "timestamp": format_seconds(self.timestamp),
                "payload": self.payload.hex()}


def parse_ksuid(value, prefix=None):
    """Decode an identifier into its parts.

    With `prefix` given it must lead the identifier; without one, everything
    before the 27-char body is taken as the prefix.
    """
    if not isinstance(value, str):
        raise MalformedIdentifier(f"identifier must be a string: {value!r}")
    if prefix is None:
        prefix, body = split_ksuid(value)
    elif value.startswith(prefix):
        body = value[len(prefix):]
    else:
        raise MalformedIdentifier(f"identifier does not start with prefix {prefix!r}: {value!r}")

    raw = decode(body)
    (offset,) = struct.unpack(">I", raw[:TIMESTAMP_BYTES])
    return KsuidParts(prefix, body, offset + KSUID_EPOCH, raw[TIMESTAMP_BYTES:])
