from typing import Optional

from . import utils
from .keys import check_secret
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, OTP


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = DEFAULT_DIGITS,
        algorithm: str = DEFAULT_ALGORITHM,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret in base32 format
        :param digits: number of integers in the OTP, 6 to 8
        :param algorithm: digest used in the HMAC: SHA1, SHA256 or SHA512
        :param name: account name
        :param issuer: issuer
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        check_secret(s)
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, algorithm=algorithm, name=name, issuer=issuer)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the current counter OTP.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return utils.strings_equal(str(otp), str(self.at(counter)))
