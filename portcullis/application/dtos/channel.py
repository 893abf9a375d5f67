"""DTOs for chat-side provisioning (roles, channels, overwrites, messages)."""

from dataclasses import dataclass, field

from portcullis.domain.enums import ChannelPermission, OverwriteTarget


@dataclass(frozen=True)
class RoleRef:
    """A server role as seen by the provisioning code."""

    id: int
    name: str
    color: int


@dataclass(frozen=True)
class ChannelRef:
    """A created text channel. mention renders as a clickable channel link."""

    id: int
    name: str

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"


@dataclass(frozen=True)
class PermissionGrant:
    """One permission overwrite on a channel."""

    target_id: int
    target_type: OverwriteTarget
    allow: frozenset[ChannelPermission] = field(default_factory=frozenset)
    deny: frozenset[ChannelPermission] = field(default_factory=frozenset)


@dataclass(frozen=True)
class WelcomeMessage:
    """Embed posted into a freshly created client channel."""

    title: str
    description: str
    color: int | None = None


@dataclass(frozen=True)
class ChannelProvisioningResult:
    """Channel and role produced for a client, plus the overwrites applied."""

    channel: ChannelRef
    role: RoleRef
    role_created: bool
    grants: tuple[PermissionGrant, ...]
