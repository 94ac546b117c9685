"""Unit tests for the bearer-token guard."""

from typing import Optional

import pytest

from application.auth.guard import BEARER_FORMAT_MESSAGE, check_auth, extract_bearer_token
from domain.shared.errors import DomainError, ErrorKind
from domain.user.auth.claims import AuthClaim
from infrastructure.auth.jwt_provider import JwtTokenProvider


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc", "abc"),
            ("bearer abc", None),
            ("BEARER abc", None),
            ("Bearer  abc", None),
            ("Bearer\tabc", None),
            (None, None),
            ("", None),
            ("abc", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("Basic abc", None),
            ("Bearer a b", None),
        ],
    )
    def test_extract(self, header: Optional[str], expected: Optional[str]) -> None:
        assert extract_bearer_token(header) == expected


class TestCheckAuth:
    def test_valid_token(self, token_provider: JwtTokenProvider, ann: AuthClaim) -> None:
        header = f"Bearer {token_provider.issue_token(ann)}"
        assert check_auth(header, token_provider) == ann

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Token abc", "bearer abc"])
    def test_malformed_header(self, token_provider: JwtTokenProvider, header: Optional[str]) -> None:
        with pytest.raises(DomainError) as exc_info:
            check_auth(header, token_provider)

        assert exc_info.value.kind is ErrorKind.AUTHENTICATION_REQUIRED
        assert exc_info.value.message == BEARER_FORMAT_MESSAGE

    def test_invalid_token(self, token_provider: JwtTokenProvider) -> None:
        with pytest.raises(DomainError) as exc_info:
            check_auth("Bearer not-a-token", token_provider)

        assert exc_info.value.kind is ErrorKind.INVALID_TOKEN
        assert exc_info.value.message == "Invalid/Expired token"

    def test_token_signed_with_other_secret(
        self, token_provider: JwtTokenProvider, ann: AuthClaim
    ) -> None:
        foreign = JwtTokenProvider(secret="someone-else", ttl_seconds=60).issue_token(ann)

        with pytest.raises(DomainError) as exc_info:
            check_auth(f"Bearer {foreign}", token_provider)

        assert exc_info.value.kind is ErrorKind.INVALID_TOKEN
