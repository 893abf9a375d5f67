"""Embed builders for portal, welcome DM and billing command replies."""

import discord

from portcullis.application.dtos.billing import BillingCustomer, BillingQuote
from portcullis.core.constants import PORTAL_EMBED_COLOR


def portal_embed() -> discord.Embed:
    """Onboarding entry point shown by /setup-portal (paired with RegisterView)."""
    return discord.Embed(
        title="Welcome to Portcullis",
        description="Access your data export tools and magic links through our client portal.",
        colour=discord.Colour(PORTAL_EMBED_COLOR),
    )


def member_welcome_embed() -> discord.Embed:
    """Direct message sent to members joining the server."""
    return discord.Embed(
        title="Welcome to the Portcullis Hub!",
        description=(
            "We're super excited you're thinking about exploring Portcullis at your "
            "organization, and we'd love to learn more about your intended use case "
            "for data exports powered by magic links.\n\n"
            "We'll need you to go through a small onboarding flow to get a bit of "
            "information about you and your organization, so to get started, run "
            "`/setup-portal` in the server."
        ),
        colour=discord.Colour(PORTAL_EMBED_COLOR),
    )


def customer_embed(customer: BillingCustomer) -> discord.Embed:
    embed = discord.Embed(
        title="Customer Created",
        description="A new Hyperline customer has been created",
        colour=discord.Colour(PORTAL_EMBED_COLOR),
    )
    embed.add_field(name="Name", value=customer.name or "N/A", inline=True)
    embed.add_field(name="Type", value=customer.customer_type.value, inline=True)
    embed.add_field(name="Customer ID", value=customer.id, inline=True)
    embed.add_field(name="Organization ID", value=customer.organization_id or "N/A", inline=False)
    return embed


def quote_embed(quote: BillingQuote) -> discord.Embed:
    embed = discord.Embed(
        title="Quote Created",
        description=f"A new quote has been created for customer {quote.customer_id}",
        colour=discord.Colour(PORTAL_EMBED_COLOR),
    )
    embed.add_field(name="Amount", value=quote.display_amount, inline=True)
    embed.add_field(name="Status", value=quote.status or "N/A", inline=True)
    embed.add_field(name="Quote URL", value=quote.hosted_url or "Not available", inline=False)
    return embed
