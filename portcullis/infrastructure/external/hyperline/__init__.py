"""Hyperline billing platform client."""

from portcullis.infrastructure.external.hyperline.client import HyperlineBillingPlatform

__all__ = ["HyperlineBillingPlatform"]
