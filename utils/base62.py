"""
Base62 codec for KSUID bodies.

A 20-byte buffer is read as one big-endian integer and written out in
base62, left-padded with '0' to a fixed 27 characters.
"""

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BYTE_LENGTH = 20
BODY_LENGTH = 27

_INDEX = {char: value for value, char in enumerate(ALPHABET)}
_MAX_VALUE = (1 << (BYTE_LENGTH * 8)) - 1


class MalformedIdentifier(ValueError):
    """Text is not a valid 27-character base62 KSUID body."""


def encode(raw):
    """Encode 20 bytes as a 27-character base62 string."""
    if len(raw) != BYTE_LENGTH:
        raise ValueError(f"expected {BYTE_LENGTH} bytes, got {len(raw)}")

    n = int.from_bytes(raw, byteorder="big")

    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(ALPHABET[remainder])

    return "".join(reversed(chars)).rjust(BODY_LENGTH, ALPHABET[0])


def decode(text):
    """Decode a 27-character base62 string back into 20 bytes."""
    if not isinstance(text, str) or len(text) != BODY_LENGTH:
        raise MalformedIdentifier(f"expected {BODY_LENGTH} base62 characters: {text!r}")

    n = 0
    for char in text:
        value = _INDEX.get(char)
        if value is None:
            raise MalformedIdentifier(f"invalid base62 character {char!r} in {text!r}")
        n = n * 62 + value

    # 62**27 exceeds 2**160, so some 27-char strings do not fit
    if n > _MAX_VALUE:
        raise MalformedIdentifier(f"value out of range for {BYTE_LENGTH} bytes: {text!r}")

    return n.to_bytes(BYTE_LENGTH, byteorder="big")
