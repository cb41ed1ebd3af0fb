from typing import Dict, Optional
from urllib.parse import SplitResult, parse_qsl, unquote, urlsplit

from .config import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD
from .exceptions import InvalidKeyURIError
from .otp import Algorithm, Digits


class Key(object):
    """
    A provisioning key: a secret plus the metadata an authenticator app
    needs, as carried by an otpauth URI.

    Given a URI like::

        otpauth://totp/Example:alice@example.com?secret=JBSWY3DPEHPK3PXP&issuer=Example

    ``issuer`` is ``Example``, ``account_name`` is ``alice@example.com`` and
    ``secret`` is ``JBSWY3DPEHPK3PXP``. Instances are read-only.
    """

    __slots__ = ("_orig", "_url", "_label_issuer", "_account_name", "_params")

    def __init__(self, orig: str, url: SplitResult, label_issuer: Optional[str], account_name: str,
                 params: Dict[str, str]) -> None:
        self._orig = orig
        self._url = url
        self._label_issuer = label_issuer
        self._account_name = account_name
        self._params = params

    @classmethod
    def from_uri(cls, uri: str) -> "Key":
        """
        Parses an otpauth provisioning URI; works for either TOTP or HOTP.

        See also:
            https://github.com/google/google-authenticator/wiki/Key-Uri-Format

        :param uri: the hotp/totp URI to parse
        :raises InvalidKeyURIError: the URI is not a usable otpauth URI
        """
        orig = uri.strip()
        try:
            url = urlsplit(orig)
        except ValueError as exc:
            raise InvalidKeyURIError(str(exc)) from exc

        if url.scheme != "otpauth":
            raise InvalidKeyURIError("Not an otpauth URI")
        if url.netloc not in ("totp", "hotp"):
            raise InvalidKeyURIError("Not a supported OTP type")

        # Issuer and account name are escaped separately; only a literal colon separates them
        label_parts = url.path[1:].split(":", 1)
        if len(label_parts) == 1:
            label_issuer = None
            account_name = unquote(label_parts[0])
        else:
            label_issuer = unquote(label_parts[0])
            account_name = unquote(label_parts[1])

        params: Dict[str, str] = {}
        for key, value in parse_qsl(url.query):
            params.setdefault(key, value)

        if not params.get("secret"):
            raise InvalidKeyURIError("No secret found in URI")
        issuer = params.get("issuer")
        if label_issuer and issuer is not None and label_issuer != issuer:
            raise InvalidKeyURIError("If issuer is specified in both label and parameters, it should be equal.")

        key = cls(orig, url, label_issuer, account_name, params)
        # Surface bad numeric or enum values now rather than on first access
        try:
            for attr in ("period", "digits", "algorithm"):
                getattr(key, attr)
        except ValueError as exc:
            raise InvalidKeyURIError(str(exc)) from exc
        return key

    def __str__(self) -> str:
        return self._orig

    def __repr__(self) -> str:
        return "Key(type={!r}, issuer={!r}, account_name={!r})".format(self.type, self.issuer, self.account_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._orig == other._orig

    def __hash__(self) -> int:
        return hash(self._orig)

    @property
    def type(self) -> str:
        """``totp`` or ``hotp``."""
        return self._url.netloc

    @property
    def issuer(self) -> Optional[str]:
        issuer = self._params.get("issuer")
        if issuer is not None:
            return issuer
        return self._label_issuer

    @property
    def account_name(self) -> str:
        return self._account_name

    @property
    def secret(self) -> str:
        """The base32 encoded secret."""
        return self._params["secret"]

    @property
    def period(self) -> int:
        value = self._params.get("period")
        if value is None:
            return DEFAULT_PERIOD
        period = int(value)
        if period <= 0:
            raise ValueError("period must be a positive integer")
        return period

    @property
    def digits(self) -> Digits:
        value = self._params.get("digits")
        if value is None:
            return DEFAULT_DIGITS
        return Digits(int(value))

    @property
    def algorithm(self) -> Algorithm:
        value = self._params.get("algorithm")
        if value is None:
            return DEFAULT_ALGORITHM
        return Algorithm(value.upper())

    @property
    def url(self) -> str:
        return self._url.geturl()


def parse_uri(uri: str) -> Key:
    """
    Shortcut for :meth:`Key.from_uri`.
    """
    return Key.from_uri(uri)
