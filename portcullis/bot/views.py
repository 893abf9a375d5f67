"""Persistent Register button and the five-field registration modal."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import discord

from portcullis.application.dtos.onboarding import RegistrationForm
from portcullis.bot import replies
from portcullis.bot.responder import InteractionResponder
from portcullis.core.constants import (
    ORGANIZATION_MAX_LENGTH,
    REGISTER_BUTTON_ID,
    REGISTRATION_MODAL_ID,
)
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

FormSubmitted = Callable[[discord.Interaction, RegistrationForm], Awaitable[None]]


class RegistrationModal(discord.ui.Modal, title="Client Registration"):
    """Client registration form (Discord allows at most five inputs)."""

    first_name = discord.ui.TextInput(label="First Name", max_length=100)
    last_name = discord.ui.TextInput(label="Last Name", max_length=100)
    organization = discord.ui.TextInput(
        label="Organization", max_length=ORGANIZATION_MAX_LENGTH
    )
    domain = discord.ui.TextInput(
        label="Domain", placeholder="e.g. runportcullis.co", max_length=253
    )
    usage_metric = discord.ui.TextInput(
        label="Table Size (rows)", placeholder="e.g. 500000", max_length=13
    )

    def __init__(self, on_form: FormSubmitted) -> None:
        super().__init__(custom_id=REGISTRATION_MODAL_ID)
        self._on_form = on_form

    def to_form(self) -> RegistrationForm:
        return RegistrationForm(
            first_name=self.first_name.value,
            last_name=self.last_name.value,
            organization=self.organization.value,
            domain=self.domain.value,
            usage_metric=self.usage_metric.value,
        )

    async def on_submit(self, interaction: discord.Interaction) -> None:
        await self._on_form(interaction, self.to_form())

    async def on_error(self, interaction: discord.Interaction, error: Exception) -> None:
        logger.exception("Registration modal error: %s", error)
        await InteractionResponder(interaction).send(replies.REGISTRATION_ERROR)


class RegisterView(discord.ui.View):
    """Register button under the portal embed. Persistent: survives bot restarts."""

    def __init__(self, on_form: FormSubmitted) -> None:
        super().__init__(timeout=None)
        self._on_form = on_form

    @discord.ui.button(
        label="Register",
        style=discord.ButtonStyle.primary,
        emoji="📝",
        custom_id=REGISTER_BUTTON_ID,
    )
    async def register(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        responder = InteractionResponder(interaction)
        try:
            await responder.send_modal(RegistrationModal(self._on_form))
        except discord.HTTPException as exc:
            logger.error("Error showing registration form: %s", exc)
            await responder.send(replies.REGISTRATION_FORM_ERROR)
