import hashlib
import hmac
from typing import Any, Callable, Dict, Optional

from . import base32
from .exceptions import InvalidDigits, InvalidPeriod, UnsupportedAlgorithm

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30
DEFAULT_ALGORITHM = "sha1"

DIGESTS: Dict[str, Callable[..., Any]] = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


def check_digits(digits: int) -> int:
    if isinstance(digits, bool) or digits not in (6, 7, 8):
        raise InvalidDigits("Digits must be 6, 7, or 8")
    return int(digits)


def check_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise InvalidPeriod("Period must be a positive number of seconds")
    return period


def get_digest(algorithm: str) -> Callable[..., Any]:
    """
    Looks up the hashlib constructor for ``SHA1``, ``SHA256`` or ``SHA512``
    (any case).
    """
    try:
        return DIGESTS[str(algorithm).lower()]
    except KeyError:
        raise UnsupportedAlgorithm("Algorithm must be SHA1, SHA256, or SHA512") from None


def dynamic_truncate(hmac_hash: bytes) -> int:
    # low nibble of the last byte picks where the 4 byte window starts
    offset = hmac_hash[-1] & 0xF
    return (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )


def compute_code(
    key: bytes,
    counter: bytes,
    digits: int = DEFAULT_DIGITS,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Implements the RFC 4226 HOTP value for one counter.

    :param key: raw secret bytes
    :param counter: the 8 byte big-endian counter
    :param digits: 6, 7 or 8
    :param algorithm: SHA1, SHA256 or SHA512
    :returns: the zero-padded decimal code
    """
    digits = check_digits(digits)
    digest = get_digest(algorithm)

    hmac_hash = bytearray(hmac.new(key, counter, digest).digest())
    code = dynamic_truncate(hmac_hash) % 10**digits
    return str(code).rjust(digits, "0")


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        algorithm: str = DEFAULT_ALGORITHM,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
    ) -> None:
        self.digits = check_digits(digits)
        get_digest(algorithm)
        self.algorithm = str(algorithm).upper()
        self.secret = s
        self.name = name or "Secret"
        self.issuer = issuer

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        if input < 0:
            raise ValueError("input must be positive integer")
        return compute_code(self.byte_secret(), self.int_to_bytestring(input), self.digits, self.algorithm)

    def byte_secret(self) -> bytes:
        return base32.decode(self.secret)

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        result = bytearray()
        while i != 0:
            result.append(i & 0xFF)
            i >>= 8
        # bytes come out least significant first
        return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))
