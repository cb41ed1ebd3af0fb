import dataclasses
from typing import Any, Optional

from .otp import Algorithm, Digits

# Number of seconds a TOTP passcode is valid for.
DEFAULT_PERIOD = 30
# Periods on either side of the current one accepted during validation.
DEFAULT_SKEW = 1
DEFAULT_DIGITS = Digits.SIX
DEFAULT_ALGORITHM = Algorithm.SHA1
# Size in bytes of generated secrets.
DEFAULT_SECRET_SIZE = 20


@dataclasses.dataclass(frozen=True)
class ValidateOpts:
    """
    Options for generating and validating TOTP passcodes.

    Fields left as ``None`` are filled in by :meth:`with_defaults`.

    :param period: number of seconds a passcode is valid for. Defaults to 30 seconds.
    :param skew: periods before or after the current time to allow. A value of 1
        allows up to ``period`` seconds on either side of the given time. Defaults
        to 1. Values greater than 1 are likely sketchy.
    :param digits: passcode length. Defaults to 6.
    :param algorithm: hash algorithm used for the HMAC. Defaults to SHA1.
    """

    period: Optional[int] = None
    skew: Optional[int] = None
    digits: Optional[Digits] = None
    algorithm: Optional[Algorithm] = None

    def with_defaults(self) -> "ResolvedValidateOpts":
        # a zero period would divide by zero, treat it as unset
        return ResolvedValidateOpts(
            period=self.period or DEFAULT_PERIOD,
            skew=DEFAULT_SKEW if self.skew is None else self.skew,
            digits=DEFAULT_DIGITS if self.digits is None else Digits(self.digits),
            algorithm=DEFAULT_ALGORITHM if self.algorithm is None else Algorithm(self.algorithm),
        )


@dataclasses.dataclass(frozen=True)
class ResolvedValidateOpts:
    """
    :class:`ValidateOpts` with every default applied.
    """

    period: int
    skew: int
    digits: Digits
    algorithm: Algorithm


@dataclasses.dataclass(frozen=True)
class GenerateOpts:
    """
    Options for :func:`pytotp.totp.generate`. The defaults are compatible with
    Google Authenticator.

    :param issuer: name of the issuing organization or company
    :param account_name: name of the user's account (eg, email address)
    :param period: number of seconds a passcode is valid for. Defaults to 30 seconds.
    :param secret_size: size in bytes of the generated secret. Defaults to 20 bytes.
    :param secret: secret to store. Defaults to a randomly generated secret of
        ``secret_size`` bytes; you should generally leave this empty.
    :param digits: passcode length. Defaults to 6.
    :param algorithm: hash algorithm used for the HMAC. Defaults to SHA1.
    :param rand: random source with a ``read(n)`` method used to generate the secret.
    """

    issuer: str = ""
    account_name: str = ""
    period: Optional[int] = None
    secret_size: Optional[int] = None
    secret: Optional[bytes] = None
    digits: Optional[Digits] = None
    algorithm: Optional[Algorithm] = None
    rand: Any = None
