import datetime
import logging
from typing import Optional, Union

from . import utils
from .clock import Clock, SystemClock, to_timestamp
from .exceptions import Expired
from .keys import Mode, parse_secret
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD, OTP, check_period

logger = logging.getLogger(__name__)


class ExpiringOTP(OTP):
    """
    Handler for secrets that carry their own creation time.

    The code is the HOTP value of the creation timestamp itself, so it stays
    the same for the whole lifetime of the secret. Once ``interval`` seconds
    have passed since creation, generation and verification raise
    :class:`~otpkit.exceptions.Expired`.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        algorithm: str = DEFAULT_ALGORITHM,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
        interval: int = DEFAULT_PERIOD,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        :param s: base32 secret followed by its 8 character hex creation time
        :param interval: lifetime of the secret in seconds
        :param clock: time collaborator deciding expiry, defaults to the system clock
        """
        self.credential = parse_secret(s, Mode.EXPIRING)
        super().__init__(s=self.credential.secret, digits=digits, algorithm=algorithm, name=name, issuer=issuer)
        self.interval = check_period(interval)
        self.clock = clock or SystemClock()

    @property
    def created_at(self) -> int:
        return self.credential.created_at

    @property
    def expires_at(self) -> int:
        return self.credential.deadline(self.interval)

    def check_expiry(self, for_time: Optional[Union[int, float, datetime.datetime]] = None) -> int:
        """
        :returns: seconds left before the secret expires
        :raises Expired: when ``for_time`` (default now) is at or past the deadline
        """
        reference = self.clock.now() if for_time is None else to_timestamp(for_time)
        expiry = self.clock.elapsed_and_expired(reference, self.expires_at)
        if expiry.expired:
            logger.info(
                "refusing secret created at %s, expired at %s",
                SystemClock.format(self.created_at),
                SystemClock.format(self.expires_at),
            )
            raise Expired("OTP is expired")
        return -expiry.elapsed

    def at(self, for_time: Union[int, float, datetime.datetime]) -> str:
        """
        :param for_time: the time at which the code is requested
        :returns: OTP value
        :raises Expired: if the secret is no longer valid at ``for_time``
        """
        self.check_expiry(for_time)
        return self.generate_otp(self.created_at)

    def now(self) -> str:
        self.check_expiry()
        return self.generate_otp(self.created_at)

    def verify(self, otp: str, for_time: Optional[Union[int, float, datetime.datetime]] = None) -> bool:
        """
        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        :raises Expired: if the secret is no longer valid
        """
        expected = self.now() if for_time is None else self.at(for_time)
        ok = utils.strings_equal(str(otp), str(expected))
        if not ok:
            logger.debug("expiring code mismatch for %s", self.name)
        return ok
