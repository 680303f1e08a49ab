class OTPError(ValueError):
    """
    Base class for malformed input and refused generation.

    A code that simply does not match is never an error; verifiers return
    False for it.
    """


class InvalidLength(OTPError):
    pass


class InvalidCharset(OTPError):
    pass


class InvalidDigits(OTPError):
    pass


class InvalidPeriod(OTPError):
    pass


class UnsupportedAlgorithm(OTPError):
    pass


class Expired(OTPError):
    pass


class InvalidUriInput(OTPError):
    pass
