import logging
import secrets
import string
from enum import Enum
from typing import NamedTuple, Optional, Union

from . import base32
from .clock import Clock, SystemClock
from .exceptions import InvalidCharset, InvalidLength

logger = logging.getLogger(__name__)

DEFAULT_SECRET_LENGTH = 24
MIN_SECRET_LENGTH = 16
# width of the hex creation-time suffix carried by expiring secrets
TIMESTAMP_WIDTH = 8


class Mode(str, Enum):
    TIME_STEP = "TOTP"
    EXPIRING = "OTP"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None


class TimeStepSecret(NamedTuple):
    secret: str

    def byte_secret(self) -> bytes:
        return base32.decode(self.secret)


class ExpiringSecret(NamedTuple):
    secret: str
    created_at: int

    def byte_secret(self) -> bytes:
        return base32.decode(self.secret)

    def deadline(self, period: int) -> int:
        return self.created_at + period


Credential = Union[TimeStepSecret, ExpiringSecret]


def check_length(length: int) -> None:
    if length < MIN_SECRET_LENGTH or length % 8 != 0:
        raise InvalidLength("Length of secret must be a multiple of 8, and at least 16 characters")


def check_secret(secret: str) -> None:
    """
    Validates a base32 secret: length first, then alphabet.

    :raises InvalidLength: shorter than 16 or not a multiple of 8
    :raises InvalidCharset: characters outside A-Z2-7 (any case)
    """
    check_length(len(secret))
    base32.decode(secret)


def parse_secret(secret: str, mode: Union[Mode, str] = Mode.TIME_STEP) -> Credential:
    """
    Splits a secret string into the credential it describes.

    Expiring secrets carry their creation time as a trailing hex suffix;
    that suffix is removed and what remains must be a valid base32 secret.
    """
    mode = Mode(mode)
    if mode is Mode.TIME_STEP:
        check_secret(secret)
        return TimeStepSecret(secret)

    if len(secret) <= TIMESTAMP_WIDTH:
        raise InvalidLength("Expiring secret is missing its key or creation time")
    key, suffix = secret[:-TIMESTAMP_WIDTH], secret[-TIMESTAMP_WIDTH:]
    check_secret(key)
    if any(c not in string.hexdigits for c in suffix):
        raise InvalidCharset("Creation time suffix is not hexadecimal")
    return ExpiringSecret(key, int(suffix, 16))


def random_base32(
    length: int = DEFAULT_SECRET_LENGTH,
    mode: Union[Mode, str] = Mode.TIME_STEP,
    clock: Optional[Clock] = None,
) -> str:
    """
    Generates a new secret.

    :param length: number of base32 characters; at least 16 and a multiple of 8
    :param mode: for ``Mode.EXPIRING`` the current time is appended as an
        8 character hex suffix
    :param clock: time source for the expiring suffix, defaults to the system clock
    :returns: the secret string
    """
    mode = Mode(mode)
    check_length(length)

    secret = "".join(secrets.choice(base32.ALPHABET) for _ in range(length))
    if mode is Mode.EXPIRING:
        clock = clock or SystemClock()
        secret += "{:0{width}x}".format(clock.now(), width=TIMESTAMP_WIDTH)

    logger.info("generated %d character %s secret", length, mode.value)
    return secret
