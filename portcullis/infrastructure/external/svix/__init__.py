"""Svix webhook platform client."""

from portcullis.infrastructure.external.svix.client import SvixWebhookPlatform

__all__ = ["SvixWebhookPlatform"]
