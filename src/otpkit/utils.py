import unicodedata
from hmac import compare_digest
from typing import Dict, Optional, Union
from urllib.parse import quote, urlencode

from .exceptions import InvalidUriInput


def build_uri(
    account: str,
    secret: str,
    digits: Optional[int] = None,
    period: Optional[int] = None,
    issuer: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    """
    Returns the TOTP provisioning URI for a secret.

    This can then be encoded in a QR Code and used to provision the Google
    Authenticator app.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param account: name of the account
    :param secret: the base32 secret
    :param digits: the length of the OTP generated code, omitted when None
    :param period: the number of seconds the OTP generator is set to
        expire every code, omitted when None
    :param issuer: the name of the OTP issuer; this will be the
        organization title of the OTP entry in Authenticator
    :param algorithm: the algorithm used in the OTP generation, omitted when None
    :returns: provisioning uri
    :raises InvalidUriInput: on a missing account or secret, or a colon in
        the account or issuer
    """
    if not account or not secret:
        raise InvalidUriInput("You must provide at least an account and a secret")
    if ":" in account or (issuer and ":" in issuer):
        raise InvalidUriInput("Neither account nor issuer can contain a colon (:) character")

    base_uri = "otpauth://totp/{0}?{1}"
    url_args: Dict[str, Union[int, str]] = {"secret": secret}

    label = quote(account)
    if issuer:
        label = quote(issuer) + ":" + label

    if algorithm is not None:
        url_args["algorithm"] = algorithm.upper()
    if digits is not None:
        url_args["digits"] = digits
    if period is not None:
        url_args["period"] = period
    if issuer:
        url_args["issuer"] = issuer

    return base_uri.format(label, urlencode(url_args).replace("+", "%20"))


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
