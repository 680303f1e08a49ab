import datetime
from typing import Optional, Union

from . import utils
from .clock import Clock as Clock
from .clock import SystemClock as SystemClock
from .exceptions import (  # noqa:F401
    Expired,
    InvalidCharset,
    InvalidDigits,
    InvalidLength,
    InvalidPeriod,
    InvalidUriInput,
    OTPError,
    UnsupportedAlgorithm,
)
from .expiring import ExpiringOTP as ExpiringOTP
from .hotp import HOTP as HOTP
from .keys import Mode as Mode
from .keys import random_base32 as random_base32
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD
from .otp import OTP as OTP
from .totp import TOTP as TOTP

Timestamp = Union[int, float, datetime.datetime]


def handler(
    secret: str,
    mode: Union[Mode, str] = Mode.TIME_STEP,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    offset: int = 0,
    algorithm: str = DEFAULT_ALGORITHM,
    clock: Optional[Clock] = None,
) -> Union[TOTP, ExpiringOTP]:
    """
    Builds the handler matching ``mode`` for a secret.

    ``offset`` only shifts time-step windows; expiring secrets ignore it.
    """
    if Mode(mode) is Mode.EXPIRING:
        return ExpiringOTP(secret, digits=digits, algorithm=algorithm, interval=period, clock=clock)
    return TOTP(secret, digits=digits, algorithm=algorithm, interval=period, offset=offset, clock=clock)


def code(
    secret: str,
    mode: Union[Mode, str] = Mode.TIME_STEP,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    offset: int = 0,
    algorithm: str = DEFAULT_ALGORITHM,
    for_time: Optional[Timestamp] = None,
    clock: Optional[Clock] = None,
) -> str:
    """
    Generates the code for a secret.

    :param secret: base32 secret, with its hex creation time for ``Mode.EXPIRING``
    :param mode: ``Mode.TIME_STEP`` ("TOTP") or ``Mode.EXPIRING`` ("OTP")
    :param digits: 6, 7 or 8
    :param period: window length, or lifetime of an expiring secret, in seconds
    :param offset: drift correction in seconds, time-step mode only
    :param algorithm: SHA1, SHA256 or SHA512
    :param for_time: time to generate the code at (defaults to now)
    :param clock: time collaborator, defaults to the system clock
    :returns: OTP value
    :raises OTPError: on malformed input, or ``Expired`` for a stale secret
    """
    otp = handler(secret, mode, digits, period, offset, algorithm, clock)
    if for_time is None:
        return otp.now()
    return otp.at(for_time)


def verify(
    otp: str,
    secret: str,
    mode: Union[Mode, str] = Mode.TIME_STEP,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    offset: int = 0,
    algorithm: str = DEFAULT_ALGORITHM,
    for_time: Optional[Timestamp] = None,
    clock: Optional[Clock] = None,
) -> bool:
    """
    Checks a code supplied by the user.

    A wrong code returns False. Malformed parameters and expired secrets
    raise, so callers can tell "wrong code" apart from "configuration error".
    """
    return handler(secret, mode, digits, period, offset, algorithm, clock).verify(otp, for_time)


def provisioning_uri(
    account: str,
    secret: str,
    digits: Optional[int] = None,
    period: Optional[int] = None,
    issuer: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    return utils.build_uri(account, secret, digits=digits, period=period, issuer=issuer, algorithm=algorithm)
