"""logo.dev logo client."""

from portcullis.infrastructure.external.logo.client import LogoDevClient

__all__ = ["LogoDevClient"]
