"""External platform clients (identity, logo, billing, webhook)."""

from portcullis.infrastructure.external._http import create_http_client
from portcullis.infrastructure.external.clerk import ClerkIdentityPlatform
from portcullis.infrastructure.external.hyperline import HyperlineBillingPlatform
from portcullis.infrastructure.external.logo import LogoDevClient
from portcullis.infrastructure.external.svix import SvixWebhookPlatform

__all__ = [
    "ClerkIdentityPlatform",
    "HyperlineBillingPlatform",
    "LogoDevClient",
    "SvixWebhookPlatform",
    "create_http_client",
]
