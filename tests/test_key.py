"""Tests for otpauth URI parsing and building."""

import pytest

from pytotp import Algorithm, Digits, InvalidKeyURIError, Key, parse_uri, random_base32
from pytotp import utils


class TestKey:
    """Test Key parsing."""

    def test_full_uri(self):
        """All fields are read from a complete URI."""
        key = Key.from_uri(
            "otpauth://totp/ACME%20Co:john.doe@email.com"
            "?secret=HXDMVJECJJWSRB3HWIZR4IFUGFTMXBOZ&issuer=ACME%20Co&algorithm=SHA256&digits=8&period=60"
        )
        assert key.type == "totp"
        assert key.issuer == "ACME Co"
        assert key.account_name == "john.doe@email.com"
        assert key.secret == "HXDMVJECJJWSRB3HWIZR4IFUGFTMXBOZ"
        assert key.algorithm == Algorithm.SHA256
        assert key.digits == Digits.EIGHT
        assert key.period == 60

    def test_defaults(self):
        """Missing parameters fall back to the defaults."""
        key = parse_uri("otpauth://totp/alice@google.com?secret=JBSWY3DPEHPK3PXP")
        assert key.issuer is None
        assert key.account_name == "alice@google.com"
        assert key.period == 30
        assert key.digits == Digits.SIX
        assert key.algorithm == Algorithm.SHA1

    def test_issuer_from_label(self):
        """The label issuer is used when the parameter is missing."""
        key = parse_uri("otpauth://totp/Example:alice?secret=JBSWY3DPEHPK3PXP")
        assert key.issuer == "Example"

    def test_encoded_colon_stays_in_label(self):
        """An escaped colon is part of the issuer or account, not a separator."""
        key = parse_uri("otpauth://totp/Acme%3ACorp:a%3Ab?secret=JBSWY3DPEHPK3PXP&issuer=Acme%3ACorp")
        assert key.issuer == "Acme:Corp"
        assert key.account_name == "a:b"

        key = parse_uri("otpauth://totp/Example%3Aalice?secret=JBSWY3DPEHPK3PXP")
        assert key.issuer is None
        assert key.account_name == "Example:alice"

    def test_hotp(self):
        """hotp URIs are accepted too."""
        assert parse_uri("otpauth://hotp/alice?secret=JBSWY3DPEHPK3PXP&counter=0").type == "hotp"

    def test_string_roundtrip(self):
        """str() returns the original URI."""
        uri = "otpauth://totp/Example:alice?secret=JBSWY3DPEHPK3PXP&issuer=Example"
        assert str(parse_uri(" " + uri + "\n")) == uri
        assert parse_uri(uri) == parse_uri(uri)

    def test_read_only(self):
        """Keys cannot be modified."""
        key = parse_uri("otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP")
        with pytest.raises(AttributeError):
            key.secret = "AAAA"

    @pytest.mark.parametrize(
        "uri",
        [
            "http://totp/alice?secret=JBSWY3DPEHPK3PXP",
            "otpauth://motp/alice?secret=JBSWY3DPEHPK3PXP",
            "otpauth://totp/alice",
            "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&digits=7",
            "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&digits=six",
            "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&algorithm=MD5",
            "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&period=0",
            "otpauth://totp/Foo:alice?secret=JBSWY3DPEHPK3PXP&issuer=Bar",
        ],
    )
    def test_invalid(self, uri):
        """Unusable URIs raise InvalidKeyURIError."""
        with pytest.raises(InvalidKeyURIError):
            parse_uri(uri)


class TestBuildURI:
    """Test the URI builder."""

    def test_totp(self):
        """Without a counter the URI is a totp one."""
        uri = utils.build_uri("JBSWY3DPEHPK3PXP", "alice@google.com", issuer="Example", period=30)
        assert uri == "otpauth://totp/Example:alice@google.com?secret=JBSWY3DPEHPK3PXP&issuer=Example&period=30"

    def test_reserved_characters_in_label(self):
        """Issuer and account are escaped separately around a literal colon."""
        uri = utils.build_uri("JBSWY3DPEHPK3PXP", "a:b", issuer="Acme:Corp")
        assert uri == "otpauth://totp/Acme%3ACorp:a%3Ab?secret=JBSWY3DPEHPK3PXP&issuer=Acme%3ACorp"


class TestSecrets:
    """Test secret helpers."""

    def test_b32_nopad(self):
        """Encoding drops padding and decoding restores it."""
        encoded = utils.b32encode_nopad(b"abc")
        assert encoded == "MFRGG"
        assert utils.b32decode_nopad(encoded.lower()) == b"abc"

    def test_random_base32(self):
        """Random secrets are base32 text of the requested length."""
        secret = random_base32()
        assert len(secret) == 32
        assert set(secret) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
        assert random_base32() != secret

    def test_random_base32_too_short(self):
        """Secrets shorter than 160 bits are refused."""
        with pytest.raises(ValueError):
            random_base32(16)

    def test_strings_equal(self):
        """Comparison normalizes unicode digits."""
        assert utils.strings_equal("482193", "４８２１９３")
        assert not utils.strings_equal("482193", "482194")
