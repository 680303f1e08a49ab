import base64

from .exceptions import InvalidCharset

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# character -> 5-bit value, upper and lower case
_VALUES = {c: i for i, c in enumerate(ALPHABET)}
_VALUES.update({c.lower(): i for c, i in list(_VALUES.items())})


def encode(data: bytes) -> str:
    """
    Encodes bytes with the RFC 4648 base32 alphabet, without padding.

    The otpauth scheme never carries "=" padding, so it is stripped here and
    never expected by :func:`decode`.
    """
    return base64.b32encode(bytes(data)).decode("ascii").rstrip("=")


def decode(text: str) -> bytes:
    """
    Decodes an unpadded base32 string (case-insensitive).

    Bits are pushed into a rolling buffer five at a time and a byte is
    emitted whenever eight have accumulated. Leftover bits at the end (fewer
    than eight) are dropped, the same way an unpadded encoder leaves them
    zero-filled.

    :param text: base32 text
    :raises InvalidCharset: on any character outside A-Z2-7
    """
    buffer = 0
    bits = 0
    out = bytearray()
    for char in text:
        try:
            value = _VALUES[char]
        except KeyError:
            raise InvalidCharset("Secret contains non-base32 characters") from None
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    return bytes(out)
