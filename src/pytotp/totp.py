import calendar
import datetime
import math
from typing import List, Optional, Union

from . import hotp, utils
from .compat import SystemRandomReader
from .config import (
    DEFAULT_ALGORITHM,
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    DEFAULT_SECRET_SIZE,
    GenerateOpts,
    ValidateOpts,
)
from .exceptions import MissingAccountNameError, MissingIssuerError, RandomSourceError
from .key import Key
from .otp import Algorithm, Digits

TimePoint = Union[datetime.datetime, int, float]

# Counters are unsigned 64-bit values on the wire
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _unix_seconds(t: TimePoint) -> int:
    if isinstance(t, datetime.datetime):
        if t.tzinfo is None:
            # naive datetimes are taken as UTC
            return calendar.timegm(t.utctimetuple())
        return math.floor(t.timestamp())
    return math.floor(t)


def counter(t: TimePoint, period: int) -> int:
    """
    Returns the moving counter for ``t``: Unix seconds divided by ``period``,
    floored.

    :param t: a datetime or a Unix timestamp
    :param period: number of seconds a counter value stays current, must be positive
    """
    return (_unix_seconds(t) // period) & _UINT64_MASK


def generate_code(secret: str, t: TimePoint) -> str:
    """
    Generates a passcode for ``t`` using a configuration that is compatible
    with Google Authenticator and most clients.
    """
    return generate_code_custom(
        secret,
        t,
        ValidateOpts(period=DEFAULT_PERIOD, skew=1, digits=Digits.SIX, algorithm=Algorithm.SHA1),
    )


def generate_code_custom(secret: str, t: TimePoint, opts: Optional[ValidateOpts] = None) -> str:
    """
    Generates the passcode valid for the period containing ``t``.

    :param secret: shared secret in base32 format
    :param t: a datetime or a Unix timestamp
    :param opts: unset fields fall back to the package defaults
    :raises InvalidSecretError: the secret is not valid base32
    """
    resolved = (opts or ValidateOpts()).with_defaults()
    return hotp.generate_code_custom(
        secret,
        counter(t, resolved.period),
        digits=resolved.digits,
        algorithm=resolved.algorithm,
    )


def validate(passcode: str, secret: str, opts: Optional[ValidateOpts] = None) -> bool:
    """
    Validates a passcode against the current time.

    Any error (a malformed secret, a passcode of the wrong length) is reported
    as ``False``; use :func:`validate_custom` to tell those apart from a wrong
    passcode.
    """
    try:
        return validate_custom(passcode, secret, datetime.datetime.now(datetime.timezone.utc), opts)
    except ValueError:
        return False


def validate_custom(passcode: str, secret: str, t: TimePoint, opts: Optional[ValidateOpts] = None) -> bool:
    """
    Validates a passcode at time ``t``, accepting the passcodes of ``skew``
    periods on either side to absorb clock drift.

    Counters are tried in the order t, t+1, t-1, t+2, t-2, ... and the first
    match wins. An error from any candidate aborts the whole check.

    :raises InvalidSecretError: the secret is not valid base32
    :raises InvalidPasscodeLengthError: the passcode does not have ``digits`` characters
    """
    resolved = (opts or ValidateOpts()).with_defaults()

    base = counter(t, resolved.period)
    counters: List[int] = [base]
    for i in range(1, resolved.skew + 1):
        counters.append((base + i) & _UINT64_MASK)
        counters.append((base - i) & _UINT64_MASK)

    for c in counters:
        if hotp.validate_custom(passcode, c, secret, digits=resolved.digits, algorithm=resolved.algorithm):
            return True
    return False


def generate(opts: GenerateOpts) -> Key:
    """
    Generates a new TOTP provisioning key.

    :raises MissingIssuerError: ``opts.issuer`` is empty
    :raises MissingAccountNameError: ``opts.account_name`` is empty
    :raises RandomSourceError: the random source failed or returned too few bytes
    """
    if not opts.issuer:
        raise MissingIssuerError()
    if not opts.account_name:
        raise MissingAccountNameError()

    period = opts.period or DEFAULT_PERIOD
    secret_size = opts.secret_size or DEFAULT_SECRET_SIZE
    digits = DEFAULT_DIGITS if opts.digits is None else Digits(opts.digits)
    algorithm = DEFAULT_ALGORITHM if opts.algorithm is None else Algorithm(opts.algorithm)
    rand = opts.rand if opts.rand is not None else SystemRandomReader()

    if opts.secret:
        secret = bytes(opts.secret)
    else:
        secret = _read_secret(rand, secret_size)

    uri = utils.build_uri(
        utils.b32encode_nopad(secret),
        name=opts.account_name,
        issuer=opts.issuer,
        period=period,
        algorithm=str(algorithm),
        digits=int(digits),
    )
    return Key.from_uri(uri)


def _read_secret(rand, size: int) -> bytes:
    try:
        secret = rand.read(size)
    except Exception as exc:
        raise RandomSourceError("reading from random source failed: {}".format(exc)) from exc
    if not isinstance(secret, (bytes, bytearray)) or len(secret) != size:
        raise RandomSourceError("random source returned {} bytes, expected {}".format(
            len(secret) if isinstance(secret, (bytes, bytearray)) else 0, size))
    return bytes(secret)
