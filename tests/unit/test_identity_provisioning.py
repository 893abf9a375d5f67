"""IdentityProvisioningService with mocked identity platform and logo provider."""

import pytest

from portcullis.domain.exceptions import PlatformTransportException, PlatformValidationException


async def test_create_user_without_organization(identity_service, identity_platform, directory_repo) -> None:
    """Without an organization only the user is created and stored (empty org link)."""
    result = await identity_service.create_user(
        email="ada@acme.co",
        external_user_id="4242",
        first_name="Ada",
        last_name="Lovelace",
        domain="acme.co",
    )
    assert result.user.id == "user_1"
    assert result.organization is None
    identity_platform.create_organization.assert_not_awaited()
    identity_platform.create_user.assert_awaited_once_with(
        email="ada@acme.co",
        first_name="Ada",
        last_name="Lovelace",
        public_metadata={"source": "discord_bot", "domain": "acme.co", "discordUserId": "4242"},
    )
    assert directory_repo.users["user_1"].organization == ""
    assert directory_repo.upserts == ["user:user_1"]


async def test_create_user_with_organization(
    identity_service, identity_platform, logo_provider, directory_repo
) -> None:
    """Organization gets slug, API key and logo; org row is stored before the user row."""
    result = await identity_service.create_user(
        email="ada@acme.co",
        external_user_id="4242",
        first_name="Ada",
        last_name="Lovelace",
        domain="acme.co",
        organization_name="Acme Corp",
    )
    organization = result.organization
    assert organization is not None
    assert organization.id == "org_1"
    assert organization.slug == "acme-corp"
    assert organization.created_by == "user_1"
    assert organization.api_key.startswith("pk_acme-corp_")
    kwargs = identity_platform.create_organization.await_args.kwargs
    assert kwargs["public_metadata"] == {"apiKey": organization.api_key, "source": "discord_bot"}
    logo_provider.fetch_logo.assert_awaited_once_with("acme.co")
    identity_platform.update_organization_logo.assert_awaited_once()
    assert identity_platform.update_organization_logo.await_args.kwargs["uploader_user_id"] == "user_1"
    assert directory_repo.upserts == ["organization:org_1", "user:user_1"]
    assert directory_repo.users["user_1"].organization == "org_1"
    assert directory_repo.organizations["org_1"].api_key == organization.api_key


async def test_duplicate_email_propagates_platform_message(identity_service, identity_platform, directory_repo) -> None:
    """A platform validation error surfaces unchanged and nothing is stored."""
    identity_platform.create_user.side_effect = PlatformValidationException(
        "clerk", "That email address is taken. Please try another.", status_code=422
    )
    with pytest.raises(PlatformValidationException, match="email address is taken"):
        await identity_service.create_user(
            email="ada@acme.co",
            external_user_id="4242",
            first_name="Ada",
            last_name="Lovelace",
            domain="acme.co",
            organization_name="Acme Corp",
        )
    assert directory_repo.upserts == []


async def test_logo_failure_prevents_organization_create(
    identity_service, identity_platform, logo_provider
) -> None:
    """The logo is fetched before the organization is created."""
    logo_provider.fetch_logo.side_effect = PlatformTransportException("logo.dev", "timeout")
    with pytest.raises(PlatformTransportException):
        await identity_service.register_organization("Acme Corp", created_by="user_1", domain="acme.co")
    identity_platform.create_organization.assert_not_awaited()
