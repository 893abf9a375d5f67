"""Identity provisioning: identity-platform user, optional organization, directory copy.

Organization creation is a two-phase write (platform create, then directory
upsert). The API key and logo are prepared before the platform create so a
failure there leaves no organization behind; a directory failure afterwards
is surfaced as a hard error and the platform record is left in place.
"""

from __future__ import annotations

from portcullis.application.dtos.directory import (
    DirectoryOrganizationRecord,
    DirectoryUserRecord,
)
from portcullis.application.dtos.identity import (
    IdentityOrganization,
    IdentityProvisioningResult,
    IdentityUser,
)
from portcullis.application.interfaces.repositories import IDirectoryRepository
from portcullis.application.interfaces.services import IIdentityPlatform, ILogoProvider
from portcullis.core.constants import SOURCE_TAG
from portcullis.shared.telemetry.logging import get_logger
from portcullis.shared.utils.generators import generate_api_key
from portcullis.shared.utils.sanitization import organization_slug

logger = get_logger(__name__)


class IdentityProvisioningService:
    """Creates identity users and organizations and mirrors them into the directory."""

    def __init__(
        self,
        identity_platform: IIdentityPlatform,
        logo_provider: ILogoProvider,
        directory_repo: IDirectoryRepository,
    ) -> None:
        self.identity_platform = identity_platform
        self.logo_provider = logo_provider
        self.directory_repo = directory_repo

    async def create_user(
        self,
        email: str,
        external_user_id: str,
        first_name: str,
        last_name: str,
        domain: str,
        organization_name: str | None = None,
    ) -> IdentityProvisioningResult:
        """Create the user and, when organization_name is given, its organization.

        Both records are persisted to the directory store: the organization
        row first, then the user row pointing at it.

        Raises:
            PlatformValidationException: Identity platform rejected the payload.
            PlatformTransportException: A platform could not be reached.
            DirectoryPersistenceException: Directory upsert failed.
        """
        user = await self.register_user(
            email=email,
            external_user_id=external_user_id,
            first_name=first_name,
            last_name=last_name,
            domain=domain,
        )
        if not organization_name:
            await self.persist_user(user, organization_id=None)
            return IdentityProvisioningResult(user=user)

        organization = await self.register_organization(
            name=organization_name, created_by=user.id, domain=domain
        )
        await self.persist_organization(organization, domain=domain)
        await self.persist_user(user, organization_id=organization.id)
        return IdentityProvisioningResult(user=user, organization=organization)

    async def register_user(
        self,
        email: str,
        external_user_id: str,
        first_name: str,
        last_name: str,
        domain: str,
    ) -> IdentityUser:
        """Create the user in the identity platform only (no directory write)."""
        user_id = await self.identity_platform.create_user(
            email=email,
            first_name=first_name,
            last_name=last_name,
            public_metadata={
                "source": SOURCE_TAG,
                "domain": domain,
                "discordUserId": external_user_id,
            },
        )
        logger.info("Identity user created: id=%s domain=%s", user_id, domain)
        return IdentityUser(
            id=user_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            domain=domain,
            source=SOURCE_TAG,
            external_user_id=external_user_id,
        )

    async def register_organization(
        self, name: str, created_by: str, domain: str
    ) -> IdentityOrganization:
        """Create the organization in the identity platform with API key and logo.

        Key generation and logo fetch run first; if either fails nothing is
        created. The logo upload follows the create.
        """
        api_key = generate_api_key(name)
        slug = organization_slug(name)
        logo = await self.logo_provider.fetch_logo(domain)
        organization_id = await self.identity_platform.create_organization(
            name=name,
            slug=slug,
            created_by=created_by,
            public_metadata={"apiKey": api_key, "source": SOURCE_TAG},
        )
        logger.info("Identity organization created: id=%s created_by=%s", organization_id, created_by)
        await self.identity_platform.update_organization_logo(
            organization_id, logo, uploader_user_id=created_by
        )
        return IdentityOrganization(
            id=organization_id,
            name=name,
            slug=slug,
            created_by=created_by,
            api_key=api_key,
            logo_url=logo.source_url,
        )

    async def persist_organization(
        self,
        organization: IdentityOrganization,
        domain: str | None,
        webhook_app_id: str | None = None,
    ) -> DirectoryOrganizationRecord:
        """Upsert the organization row (keyed by identity organization id).

        Raises:
            DirectoryPersistenceException: The directory write failed.
        """
        record = DirectoryOrganizationRecord(
            id=organization.id,
            created_by=organization.created_by,
            organization_name=organization.name,
            api_key=organization.api_key,
            domain=domain or None,
            webhook_app_id=webhook_app_id,
        )
        await self.directory_repo.upsert_organization(record)
        return record

    async def persist_user(
        self, user: IdentityUser, organization_id: str | None
    ) -> DirectoryUserRecord:
        """Upsert the user row (keyed by identity user id)."""
        record = DirectoryUserRecord(
            id=user.id,
            email=user.email,
            discord_user_id=user.external_user_id,
            first_name=user.first_name,
            last_name=user.last_name,
            domain=user.domain,
            organization=organization_id or "",
        )
        await self.directory_repo.upsert_user(record)
        return record
