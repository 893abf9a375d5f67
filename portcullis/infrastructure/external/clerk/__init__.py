"""Clerk identity platform client."""

from portcullis.infrastructure.external.clerk.client import ClerkIdentityPlatform

__all__ = ["ClerkIdentityPlatform"]
