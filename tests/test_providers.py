"""Tests for the built-in Google, Active Directory and Windows factories."""

from __future__ import annotations

import pytest

from tessera.foundation.application.factory import LoginFactory
from tessera.foundation.domain import Claim, LoginValidationError, ProviderKind
from tessera.infra.auth.providers import (
    ACTIVE_DIRECTORY,
    CLAIM_TYPE_EMAIL,
    CLAIM_TYPE_GIVEN_NAME,
    CLAIM_TYPE_NAME,
    CLAIM_TYPE_NAME_IDENTIFIER,
    CLAIM_TYPE_PRIMARY_SID,
    CLAIM_TYPE_SURNAME,
    GOOGLE,
    GOOGLE_ISSUER,
    WINDOWS,
)

SID = "S-1-5-21-3623811015-3361044348-30300820-1013"


@pytest.mark.unit
class TestGoogleFactory:
    def test_issuer_and_provider(self) -> None:
        assert GOOGLE.issuer == "https://accounts.google.com"
        assert GOOGLE.provider == ProviderKind.GOOGLE

    def test_full_oidc_claim_set(self, google_claims: list[Claim]) -> None:
        login = GOOGLE.create(google_claims)
        assert login.provider == ProviderKind.GOOGLE
        assert login.subject == "109876543210"
        assert login.name == "Alice Example"
        assert login.email == "alice@example.com"
        assert login.email_verified is True
        assert login.given_name == "Alice"
        assert login.surname == "Example"
        assert login.picture == "https://example.com/alice.png"

    def test_minimal_round_trip(self) -> None:
        login = GOOGLE.create(
            [
                Claim("sub", "s1", GOOGLE_ISSUER),
                Claim("name", "n1", GOOGLE_ISSUER),
                Claim("email", "e1", GOOGLE_ISSUER),
                Claim("email_verified", "true", GOOGLE_ISSUER),
            ]
        )
        assert (login.provider, login.subject, login.name, login.email) == (
            ProviderKind.GOOGLE,
            "s1",
            "n1",
            "e1",
        )
        assert login.email_verified is True

    def test_ws_federation_claim_types(self) -> None:
        login = GOOGLE.create(
            [
                Claim(CLAIM_TYPE_NAME_IDENTIFIER, "s1", GOOGLE_ISSUER),
                Claim("name", "n1", GOOGLE_ISSUER),
                Claim(CLAIM_TYPE_EMAIL, "e1", GOOGLE_ISSUER),
                Claim(CLAIM_TYPE_GIVEN_NAME, "Given", GOOGLE_ISSUER),
                Claim(CLAIM_TYPE_SURNAME, "Sur", GOOGLE_ISSUER),
            ]
        )
        assert login.subject == "s1"
        assert login.email == "e1"
        assert login.given_name == "Given"
        assert login.surname == "Sur"

    def test_email_verified_defaults_false(self) -> None:
        login = GOOGLE.create([Claim("sub", "s"), Claim("name", "n"), Claim("email", "e")])
        assert login.email_verified is False

    def test_malformed_email_verified_fails(self) -> None:
        with pytest.raises(LoginValidationError) as info:
            GOOGLE.create(
                [
                    Claim("sub", "s"),
                    Claim("name", "n"),
                    Claim("email", "e"),
                    Claim("email_verified", "yes"),
                ]
            )
        assert info.value.error_code == "INVALID_CLAIM"

    @pytest.mark.parametrize(
        ("missing", "field", "scope"),
        [
            ("sub", "subject", "openid"),
            ("name", "name", "profile"),
            ("email", "email", "email"),
        ],
    )
    def test_missing_required_claim(
        self, google_claims: list[Claim], missing: str, field: str, scope: str
    ) -> None:
        claims = [c for c in google_claims if c.type != missing]
        with pytest.raises(LoginValidationError) as info:
            GOOGLE.create(claims)
        assert info.value.field == field
        assert f"{scope} scope" in info.value.reason

    def test_subject_reported_before_name_and_email(self) -> None:
        with pytest.raises(LoginValidationError) as info:
            GOOGLE.create([Claim("picture", "p")])
        assert info.value.field == "subject"


@pytest.mark.unit
class TestDirectoryFactories:
    @pytest.mark.parametrize(
        ("factory", "provider", "issuer"),
        [
            (ACTIVE_DIRECTORY, ProviderKind.ACTIVE_DIRECTORY, "AD AUTHORITY"),
            (WINDOWS, ProviderKind.WINDOWS, "LOCAL AUTHORITY"),
        ],
    )
    def test_issuer_and_provider(
        self, factory: LoginFactory, provider: ProviderKind, issuer: str
    ) -> None:
        assert factory.provider == provider
        assert factory.issuer == issuer

    @pytest.mark.parametrize("factory", [ACTIVE_DIRECTORY, WINDOWS])
    def test_name_is_normalized(self, factory: LoginFactory) -> None:
        login = factory.create(
            [Claim(CLAIM_TYPE_PRIMARY_SID, SID), Claim(CLAIM_TYPE_NAME, "CORP\\alice")]
        )
        assert login.subject == SID
        assert login.name == "alice"

    @pytest.mark.parametrize("factory", [ACTIVE_DIRECTORY, WINDOWS])
    def test_no_profile_fields(self, factory: LoginFactory) -> None:
        login = factory.create([Claim(CLAIM_TYPE_PRIMARY_SID, SID), Claim(CLAIM_TYPE_NAME, "b")])
        assert login.name == "b"
        assert login.email is None
        assert login.email_verified is None
        assert login.picture is None

    @pytest.mark.parametrize("factory", [ACTIVE_DIRECTORY, WINDOWS])
    def test_missing_name(self, factory: LoginFactory) -> None:
        with pytest.raises(LoginValidationError) as info:
            factory.create([Claim(CLAIM_TYPE_PRIMARY_SID, SID)])
        assert info.value.field == "name"
        assert info.value.reason == "missing name claim"

    @pytest.mark.parametrize("factory", [ACTIVE_DIRECTORY, WINDOWS])
    def test_empty_name_is_missing_not_anonymous(self, factory: LoginFactory) -> None:
        with pytest.raises(LoginValidationError) as info:
            factory.create([Claim(CLAIM_TYPE_PRIMARY_SID, SID), Claim(CLAIM_TYPE_NAME, "")])
        assert info.value.field == "name"

    @pytest.mark.parametrize("factory", [ACTIVE_DIRECTORY, WINDOWS])
    def test_missing_sid(self, factory: LoginFactory) -> None:
        with pytest.raises(LoginValidationError) as info:
            factory.create([Claim(CLAIM_TYPE_NAME, "alice")])
        assert info.value.field == "subject"
        assert info.value.reason == "missing primarysid claim"

    def test_oidc_name_claim_not_recognized(self) -> None:
        with pytest.raises(LoginValidationError) as info:
            ACTIVE_DIRECTORY.create([Claim(CLAIM_TYPE_PRIMARY_SID, SID), Claim("name", "alice")])
        assert info.value.field == "name"
