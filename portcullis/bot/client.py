"""The Portcullis Discord bot: slash commands, persistent portal view, member welcome."""

from __future__ import annotations

import discord
from discord import Intents, app_commands
from discord.ext import commands

from portcullis.application.dtos.onboarding import RegistrationForm
from portcullis.bot import replies
from portcullis.bot.dependencies import ServiceContainer, build_container
from portcullis.bot.embeds import member_welcome_embed, portal_embed
from portcullis.bot.handlers import (
    handle_create_customer,
    handle_create_quote,
    handle_create_user,
    handle_registration_submit,
)
from portcullis.bot.responder import InteractionResponder
from portcullis.bot.views import RegisterView
from portcullis.core.config import Settings
from portcullis.domain.enums import Currency, CustomerType
from portcullis.infrastructure.discord import DiscordGuildGateway
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

CUSTOMER_TYPE_CHOICES = [
    app_commands.Choice(name=value.capitalize(), value=value) for value in CustomerType.values()
]
CURRENCY_CHOICES = [app_commands.Choice(name=value, value=value) for value in Currency.values()]


class PortcullisBot(commands.Bot):
    """Client onboarding bot.

    Services are built in setup_hook (after login, inside the event loop)
    and released in close().
    """

    def __init__(self, settings: Settings) -> None:
        intents = Intents.default()
        intents.members = True  # member join events and member lookups for role grants

        super().__init__(
            command_prefix="!",
            intents=intents,
            description="Portcullis client onboarding.",
        )
        self.settings = settings
        self.container: ServiceContainer | None = None
        self._setup_commands()

    @property
    def services(self) -> ServiceContainer:
        if self.container is None:
            raise RuntimeError("Bot services are not initialized (setup_hook has not run)")
        return self.container

    def _setup_commands(self) -> None:
        """Register slash commands on the bot's command tree."""

        @self.tree.command(name="setup-portal", description="Open the client registration portal")
        async def setup_portal_command(interaction: discord.Interaction) -> None:
            await InteractionResponder(interaction).send(
                embed=portal_embed(), view=RegisterView(self.on_registration_form)
            )

        @self.tree.command(name="create-user", description="Create a Clerk user and optional organization")
        @app_commands.describe(
            email="User's email address",
            first_name="User's first name",
            last_name="User's last name",
            domain="Organization's web domain",
            organization="Organization name (optional)",
        )
        @app_commands.default_permissions(manage_guild=True)
        async def create_user_command(
            interaction: discord.Interaction,
            email: str,
            first_name: str,
            last_name: str,
            domain: str,
            organization: str | None = None,
        ) -> None:
            await handle_create_user(
                InteractionResponder(interaction),
                self.services.identity,
                email=email,
                first_name=first_name,
                last_name=last_name,
                domain=domain,
                member_id=interaction.user.id,
                organization=organization,
            )

        @self.tree.command(name="create-customer", description="Create a Hyperline customer")
        @app_commands.describe(
            name="Customer name",
            email="Billing email",
            organization_id="Directory organization id",
            customer_type="Customer type",
            currency="Billing currency",
        )
        @app_commands.rename(customer_type="type")
        @app_commands.choices(customer_type=CUSTOMER_TYPE_CHOICES, currency=CURRENCY_CHOICES)
        @app_commands.default_permissions(manage_guild=True)
        async def create_customer_command(
            interaction: discord.Interaction,
            name: str,
            email: str,
            organization_id: str,
            customer_type: app_commands.Choice[str],
            currency: app_commands.Choice[str],
        ) -> None:
            await handle_create_customer(
                InteractionResponder(interaction),
                self.services.billing,
                name=name,
                customer_type=customer_type.value,
                currency=currency.value,
                email=email,
                organization_id=organization_id,
            )

        @self.tree.command(name="create-quote", description="Create a Hyperline quote")
        @app_commands.describe(
            customer_id="Hyperline customer id",
            amount="Amount in minor units (e.g. cents)",
            currency="Quote currency",
        )
        @app_commands.choices(currency=CURRENCY_CHOICES)
        @app_commands.default_permissions(manage_guild=True)
        async def create_quote_command(
            interaction: discord.Interaction,
            customer_id: str,
            amount: app_commands.Range[int, 1],
            currency: app_commands.Choice[str],
        ) -> None:
            await handle_create_quote(
                InteractionResponder(interaction),
                self.services.billing,
                customer_id=customer_id,
                amount=amount,
                currency=currency.value,
            )

    async def on_registration_form(
        self, interaction: discord.Interaction, form: RegistrationForm
    ) -> None:
        """Registration modal submitted: provision inside the interaction's guild."""
        responder = InteractionResponder(interaction)
        guild = interaction.guild
        if guild is None or self.user is None:
            await responder.send(replies.GUILD_ONLY)
            return
        gateway = DiscordGuildGateway(guild, bot_user_id=self.user.id)
        await handle_registration_submit(
            responder,
            form,
            member_id=interaction.user.id,
            build_workflow=lambda: self.services.registration_workflow(gateway),
        )

    async def setup_hook(self) -> None:
        """Build services and re-attach the persistent Register button."""
        self.container = build_container(self.settings)
        self.add_view(RegisterView(self.on_registration_form))
        logger.info("Services initialized; persistent portal view registered")

    async def on_ready(self) -> None:
        user = self.user
        logger.info("Discord bot ready: user=%s guilds=%d", user.name if user else "unknown", len(self.guilds))

    async def on_member_join(self, member: discord.Member) -> None:
        """Send the onboarding welcome DM to someone joining the server."""
        if member.bot:
            return
        try:
            await member.send(embed=member_welcome_embed())
            logger.info("Welcome DM sent: member=%s", member.id)
        except (discord.Forbidden, discord.HTTPException) as exc:
            # DMs disabled; non-fatal
            logger.info("Welcome DM failed: member=%s error=%s", member.id, exc)

    async def close(self) -> None:
        if self.container is not None:
            await self.container.aclose()
            self.container = None
        await super().close()
