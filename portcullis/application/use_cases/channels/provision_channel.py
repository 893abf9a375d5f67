"""Channel provisioning: domain role, private welcome channel, role grant, welcome post.

The domain role is lookup-or-create. Two concurrent first-time submissions
for the same domain can both miss the lookup and create a role each; that
race is tolerated and reported through a role-count check after create.
"""

from __future__ import annotations

from portcullis.application.dtos.channel import (
    ChannelProvisioningResult,
    ChannelRef,
    PermissionGrant,
    RoleRef,
    WelcomeMessage,
)
from portcullis.application.interfaces.services import IGuildGateway
from portcullis.core.constants import DOMAIN_ROLE_COLOR
from portcullis.domain.enums import ChannelPermission, OverwriteTarget
from portcullis.domain.exceptions import ChannelProvisioningException
from portcullis.domain.value_objects.core import Submission
from portcullis.shared.telemetry.logging import get_logger
from portcullis.shared.utils.sanitization import welcome_channel_name

logger = get_logger(__name__)

_VIEW_SEND = frozenset({ChannelPermission.VIEW_CHANNEL, ChannelPermission.SEND_MESSAGES})
_VIEW_SEND_MANAGE = _VIEW_SEND | {ChannelPermission.MANAGE_CHANNELS}


def build_welcome_message(submission: Submission, color: int | None = None) -> WelcomeMessage:
    """Welcome embed for a new client channel."""
    return WelcomeMessage(
        title=f"Welcome {submission.full_name}!",
        description=(
            "Thank you for registering with Portcullis.\n\n"
            f"**Organization:** {submission.organization}\n"
            f"**Domain:** {submission.domain}\n"
            f"**Table Size:** {submission.usage_metric:,} rows"
        ),
        color=color,
    )


class ChannelProvisioningService:
    """Provisions a client's private channel inside one chat server."""

    def __init__(
        self,
        gateway: IGuildGateway,
        operator_user_id: int,
        role_color: int = DOMAIN_ROLE_COLOR,
    ) -> None:
        self.gateway = gateway
        self.operator_user_id = operator_user_id
        self.role_color = role_color

    async def ensure_domain_role(self, domain: str) -> tuple[RoleRef, bool]:
        """Return the role named exactly domain, creating it if absent.

        Returns:
            (role, created) where created is True when this call made the role.
        """
        role = await self.gateway.find_role(domain)
        if role is not None:
            logger.info("Reusing domain role: name=%s id=%s", domain, role.id)
            return role, False
        role = await self.gateway.create_role(domain, self.role_color)
        logger.info("Created domain role: name=%s id=%s", domain, role.id)
        if await self.gateway.count_roles(domain) > 1:
            logger.warning(
                "Duplicate domain roles detected for %s (concurrent registration); keeping id=%s",
                domain,
                role.id,
            )
        return role, True

    def build_grants(self, role: RoleRef) -> list[PermissionGrant]:
        """Overwrites for a client channel, in application order.

        everyone: deny view; domain role: view+send; operator: view+send;
        bot: view+send+manage.
        """
        return [
            PermissionGrant(
                target_id=self.gateway.everyone_role_id,
                target_type=OverwriteTarget.ROLE,
                deny=frozenset({ChannelPermission.VIEW_CHANNEL}),
            ),
            PermissionGrant(
                target_id=role.id,
                target_type=OverwriteTarget.ROLE,
                allow=_VIEW_SEND,
            ),
            PermissionGrant(
                target_id=self.operator_user_id,
                target_type=OverwriteTarget.MEMBER,
                allow=_VIEW_SEND,
            ),
            PermissionGrant(
                target_id=self.gateway.bot_user_id,
                target_type=OverwriteTarget.MEMBER,
                allow=_VIEW_SEND_MANAGE,
            ),
        ]

    async def provision_channel(
        self,
        domain: str,
        organization_label: str,
        granted_member_id: int,
        welcome: WelcomeMessage | None = None,
    ) -> ChannelProvisioningResult:
        """Role lookup-or-create, private channel, role grant, welcome message.

        When welcome has no colour the role colour is used.

        Raises:
            ChannelProvisioningException: A chat step failed; carries the role
                and, when it exists, the channel.
        """
        try:
            role, role_created = await self.ensure_domain_role(domain)
        except Exception as exc:
            logger.error("Error creating domain role %s: %s", domain, exc)
            raise ChannelProvisioningException("role", str(exc)) from exc

        grants = self.build_grants(role)
        channel_name = welcome_channel_name(organization_label)
        try:
            channel = await self.gateway.create_private_channel(channel_name, grants)
        except Exception as exc:
            logger.error("Error creating channel %s: %s", channel_name, exc)
            raise ChannelProvisioningException("channel", str(exc), role=role) from exc
        logger.info("Created client channel: name=%s id=%s", channel.name, channel.id)

        await self._finish(channel, role, granted_member_id, welcome)
        return ChannelProvisioningResult(
            channel=channel,
            role=role,
            role_created=role_created,
            grants=tuple(grants),
        )

    async def _finish(
        self,
        channel: ChannelRef,
        role: RoleRef,
        member_id: int,
        welcome: WelcomeMessage | None,
    ) -> None:
        """Grant the role and post the welcome; failures keep the channel reference."""
        try:
            await self.gateway.add_role_to_member(member_id, role)
        except Exception as exc:
            logger.error("Error granting role %s to member %s: %s", role.id, member_id, exc)
            raise ChannelProvisioningException(
                "role_grant", str(exc), channel=channel, role=role
            ) from exc
        if welcome is None:
            return
        if welcome.color is None:
            welcome = WelcomeMessage(
                title=welcome.title, description=welcome.description, color=role.color
            )
        try:
            await self.gateway.send_message(channel, welcome)
        except Exception as exc:
            logger.error("Error posting welcome message in %s: %s", channel.id, exc)
            raise ChannelProvisioningException(
                "welcome_message", str(exc), channel=channel, role=role
            ) from exc
