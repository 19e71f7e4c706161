import pytest

from modules.auth.models import TokenClaims
from shared.models import AuthenticatedUser


class TestTokenClaims:
    def test_parse_payload(self):
        claims = TokenClaims(sub="bob@example.com", email="bob@example.com", exp=1704067200, iat=1704063600)
        assert claims.subject == "bob@example.com"

    def test_subject_falls_back_to_email(self):
        claims = TokenClaims(email="bob@example.com", exp=1704067200)
        assert claims.subject == "bob@example.com"

    def test_subject_empty_without_sub_or_email(self):
        assert TokenClaims(exp=1704067200).subject == ""

    def test_extra_claims_ignored(self):
        claims = TokenClaims(sub="a@b.com", exp=1704067200, role="admin")
        assert not hasattr(claims, "role")

    def test_exp_required(self):
        with pytest.raises(Exception):  # Pydantic ValidationError
            TokenClaims(sub="a@b.com")


class TestAuthenticatedUser:
    def test_user_is_immutable(self):
        """AuthenticatedUser should be immutable."""
        user = AuthenticatedUser(email="bob@example.com")
        with pytest.raises(Exception):  # Pydantic ValidationError
            user.email = "other@example.com"
