"""discord.py implementation of IGuildGateway for one guild."""

from __future__ import annotations

from typing import Any

import discord

from portcullis.application.dtos.channel import (
    ChannelRef,
    PermissionGrant,
    RoleRef,
    WelcomeMessage,
)
from portcullis.domain.enums import OverwriteTarget
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

AUDIT_REASON = "Client onboarding"


def _role_ref(role: discord.Role) -> RoleRef:
    return RoleRef(id=role.id, name=role.name, color=role.colour.value)


def to_permission_overwrite(grant: PermissionGrant) -> discord.PermissionOverwrite:
    """Map a grant onto a PermissionOverwrite (allow True, deny False)."""
    flags: dict[str, bool] = {}
    for permission in grant.deny:
        flags[permission.value] = False
    for permission in grant.allow:
        flags[permission.value] = True
    return discord.PermissionOverwrite(**flags)


class DiscordGuildGateway:
    """Roles, channels and messages in a single guild, via the bot's connection."""

    def __init__(self, guild: discord.Guild, bot_user_id: int) -> None:
        self._guild = guild
        self._bot_user_id = bot_user_id

    @property
    def everyone_role_id(self) -> int:
        return self._guild.default_role.id

    @property
    def bot_user_id(self) -> int:
        return self._bot_user_id

    async def find_role(self, name: str) -> RoleRef | None:
        role = discord.utils.get(self._guild.roles, name=name)
        return _role_ref(role) if role is not None else None

    async def count_roles(self, name: str) -> int:
        return sum(1 for role in self._guild.roles if role.name == name)

    async def create_role(self, name: str, color: int) -> RoleRef:
        role = await self._guild.create_role(
            name=name, colour=discord.Colour(color), reason=AUDIT_REASON
        )
        return _role_ref(role)

    def _overwrite_target(self, grant: PermissionGrant) -> Any:
        if grant.target_type is OverwriteTarget.ROLE:
            if grant.target_id == self._guild.default_role.id:
                return self._guild.default_role
            return self._guild.get_role(grant.target_id) or discord.Object(
                id=grant.target_id, type=discord.Role
            )
        return self._guild.get_member(grant.target_id) or discord.Object(
            id=grant.target_id, type=discord.Member
        )

    async def create_private_channel(
        self, name: str, grants: list[PermissionGrant]
    ) -> ChannelRef:
        overwrites = {
            self._overwrite_target(grant): to_permission_overwrite(grant) for grant in grants
        }
        channel = await self._guild.create_text_channel(
            name, overwrites=overwrites, reason=AUDIT_REASON
        )
        return ChannelRef(id=channel.id, name=channel.name)

    async def add_role_to_member(self, member_id: int, role: RoleRef) -> None:
        member = self._guild.get_member(member_id)
        if member is None:
            member = await self._guild.fetch_member(member_id)
        await member.add_roles(discord.Object(id=role.id), reason=AUDIT_REASON)

    async def send_message(self, channel: ChannelRef, message: WelcomeMessage) -> None:
        target = self._guild.get_channel(channel.id)
        if target is None:
            target = await self._guild.fetch_channel(channel.id)
        if not isinstance(target, discord.TextChannel):
            raise TypeError(f"Channel {channel.id} is not a text channel")
        embed = discord.Embed(
            title=message.title,
            description=message.description,
            colour=discord.Colour(message.color) if message.color is not None else None,
        )
        await target.send(embed=embed)
