import bcrypt
import pytest

from modules.accounts.models import (
    CredentialEncoding,
    HashedCredential,
    LegacyCredential,
    classify_credential,
)
from modules.accounts.passwords import PasswordVerifier
from shared.exceptions import ValidationError


class TestHash:
    def test_hash_is_bcrypt(self, passwords):
        """Hashes should carry the $2b$ marker and the configured cost."""
        hashed = passwords.hash("pw123")
        assert hashed.startswith("$2b$04$")
        assert isinstance(classify_credential(hashed), HashedCredential)

    def test_hash_is_salted(self, passwords):
        """Hashing the same password twice gives different hashes."""
        assert passwords.hash("pw123") != passwords.hash("pw123")

    def test_default_cost_factor_is_ten(self):
        assert PasswordVerifier().rounds == 10

    def test_empty_password_rejected(self, passwords):
        with pytest.raises(ValidationError):
            passwords.hash("")

    def test_password_over_72_bytes_rejected(self, passwords):
        """bcrypt would silently truncate; refuse instead."""
        with pytest.raises(ValidationError) as exc_info:
            passwords.hash("x" * 73)
        assert exc_info.value.code == "PASSWORD_TOO_LONG"

    def test_password_of_72_bytes_accepted(self, passwords):
        assert passwords.hash("x" * 72).startswith("$2b$")


class TestVerify:
    def test_hashed_match(self, passwords):
        credential = HashedCredential(passwords.hash("pw123"))
        result = passwords.verify("pw123", credential)
        assert result.matched is True
        assert result.encoding is CredentialEncoding.HASH

    def test_hashed_mismatch(self, passwords):
        credential = HashedCredential(passwords.hash("pw123"))
        result = passwords.verify("wrongpw", credential)
        assert result.matched is False
        assert result.encoding is CredentialEncoding.HASH

    def test_hash_is_never_compared_literally(self, passwords):
        """Supplying the hash string itself as the password must not match."""
        hashed = passwords.hash("pw123")
        result = passwords.verify(hashed, HashedCredential(hashed))
        assert result.matched is False

    def test_corrupt_hash_does_not_match(self, passwords):
        """A hash-shaped but invalid value fails closed."""
        result = passwords.verify("pw123", HashedCredential("$2b$10$garbage"))
        assert result.matched is False
        assert result.encoding is CredentialEncoding.HASH

    def test_overlong_password_against_hash(self, passwords):
        credential = HashedCredential(passwords.hash("pw123"))
        assert passwords.verify("x" * 100, credential).matched is False

    def test_legacy_match(self, passwords):
        result = passwords.verify("hunter2", LegacyCredential("hunter2"))
        assert result.matched is True
        assert result.encoding is CredentialEncoding.PLAINTEXT
        assert result.needs_rehash is True

    def test_legacy_mismatch(self, passwords):
        result = passwords.verify("hunter3", LegacyCredential("hunter2"))
        assert result.matched is False
        assert result.needs_rehash is False

    def test_legacy_comparison_is_exact(self, passwords):
        """No trimming or case folding on legacy passwords."""
        assert passwords.verify("Hunter2", LegacyCredential("hunter2")).matched is False
        assert passwords.verify("hunter2 ", LegacyCredential("hunter2")).matched is False

    def test_empty_legacy_credential_never_matches(self, passwords):
        assert passwords.verify("", LegacyCredential("")).matched is False

    def test_unknown_credential_type(self, passwords):
        with pytest.raises(TypeError):
            passwords.verify("pw", "raw-string")


class TestCheckUnknown:
    def test_never_matches(self, passwords):
        assert passwords.check_unknown("unknown-account") is False
        assert passwords.check_unknown("pw123") is False

    def test_runs_bcrypt_at_configured_cost(self, passwords, monkeypatch):
        calls = []
        real_checkpw = bcrypt.checkpw

        def recording_checkpw(password, hashed):
            calls.append(hashed)
            return real_checkpw(password, hashed)

        monkeypatch.setattr(bcrypt, "checkpw", recording_checkpw)
        passwords.check_unknown("pw123")

        assert len(calls) == 1
        assert calls[0].startswith(b"$2b$04$")
