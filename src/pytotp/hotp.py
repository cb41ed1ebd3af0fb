from typing import Optional, Union

from . import utils
from .exceptions import InvalidPasscodeLengthError
from .otp import OTP, Algorithm, Digits


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: Union[int, Digits] = Digits.SIX,
        algorithm: Union[str, Algorithm] = Algorithm.SHA1,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret in base32 format
        :param initial_count: starting HMAC counter value, defaults to 0
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash algorithm to use in the HMAC (expected to be SHA1)
        :param name: account name
        :param issuer: issuer
        """
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

    def provisioning_uri(
        self,
        name: Optional[str] = None,
        initial_count: Optional[int] = None,
        issuer_name: Optional[str] = None,
    ) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        See also:
            https://github.com/google/google-authenticator/wiki/Key-Uri-Format

        :param name: name of the user account
        :param initial_count: starting HMAC counter value, defaults to 0
        :param issuer_name: the name of the OTP issuer; this will be the
            organization title of the OTP entry in Authenticator
        :returns: provisioning URI
        """
        return utils.build_uri(
            self.secret,
            name=name if name else self.name,
            initial_count=initial_count if initial_count is not None else self.initial_count,
            issuer=issuer_name if issuer_name else self.issuer,
            algorithm=str(self.algorithm),
            digits=int(self.digits),
        )


def generate_code_custom(
    secret: str,
    counter: int,
    digits: Union[int, Digits] = Digits.SIX,
    algorithm: Union[str, Algorithm] = Algorithm.SHA1,
) -> str:
    """
    Generates the passcode for a base32 secret at the given counter.

    :raises InvalidSecretError: the secret is not valid base32
    """
    return HOTP(secret, digits=digits, algorithm=algorithm).at(counter)


def validate_custom(
    passcode: str,
    counter: int,
    secret: str,
    digits: Union[int, Digits] = Digits.SIX,
    algorithm: Union[str, Algorithm] = Algorithm.SHA1,
) -> bool:
    """
    Checks a passcode against the one expected at ``counter``.

    A passcode of the wrong length is an error rather than a mismatch, so
    callers can tell a misconfigured digit count from a wrong code.

    :raises InvalidPasscodeLengthError: passcode length differs from ``digits``
    :raises InvalidSecretError: the secret is not valid base32
    """
    hotp = HOTP(secret, digits=digits, algorithm=algorithm)
    passcode = str(passcode).strip()
    if len(passcode) != hotp.digits.length:
        raise InvalidPasscodeLengthError()
    return hotp.verify(passcode, counter)
