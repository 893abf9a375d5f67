"""Single-acknowledgment wrapper around a discord.Interaction.

An interaction must be acknowledged (deferred or answered) exactly once.
A second acknowledgment attempt is logged as a warning and the content is
delivered through the follow-up channel instead; it is never re-raised.
"""

from __future__ import annotations

from typing import Any

import discord

from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class InteractionResponder:
    """Acknowledges one interaction once, then edits or follows up."""

    def __init__(self, interaction: discord.Interaction, ephemeral: bool = True) -> None:
        self.interaction = interaction
        self.ephemeral = ephemeral
        self._deferred = False

    @property
    def acknowledged(self) -> bool:
        return self.interaction.response.is_done()

    async def defer(self) -> None:
        """Acknowledge now and answer later (slow work ahead)."""
        if self.acknowledged:
            logger.warning(
                "Interaction %s already acknowledged; skipping defer", self.interaction.id
            )
            return
        try:
            await self.interaction.response.defer(ephemeral=self.ephemeral, thinking=True)
        except discord.InteractionResponded:
            logger.warning("Interaction %s acknowledged twice (defer)", self.interaction.id)
            return
        self._deferred = True

    async def send(
        self,
        content: str | None = None,
        *,
        embed: discord.Embed | None = None,
        view: discord.ui.View | None = None,
    ) -> None:
        """Deliver the reply: first response, edit of the deferred one, or a follow-up."""
        kwargs: dict[str, Any] = {}
        if embed is not None:
            kwargs["embed"] = embed
        if view is not None:
            kwargs["view"] = view

        if not self.acknowledged:
            try:
                await self.interaction.response.send_message(
                    content, ephemeral=self.ephemeral, **kwargs
                )
                return
            except discord.InteractionResponded:
                logger.warning("Interaction %s acknowledged twice (reply)", self.interaction.id)

        if self._deferred:
            await self.interaction.edit_original_response(content=content, **kwargs)
        else:
            await self.interaction.followup.send(
                content or discord.utils.MISSING, ephemeral=self.ephemeral, **kwargs
            )

    async def send_modal(self, modal: discord.ui.Modal) -> None:
        """Answer with a modal (a modal is itself the acknowledgment)."""
        if self.acknowledged:
            logger.warning(
                "Interaction %s already acknowledged; cannot open modal", self.interaction.id
            )
            return
        try:
            await self.interaction.response.send_modal(modal)
        except discord.InteractionResponded:
            logger.warning("Interaction %s acknowledged twice (modal)", self.interaction.id)
