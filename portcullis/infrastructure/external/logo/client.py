"""logo.dev client: organization logos by web domain."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from portcullis.application.dtos.identity import LogoImage
from portcullis.domain.exceptions import PlatformTransportException
from portcullis.infrastructure.external._http import send_platform_request

PLATFORM = "logo.dev"


class LogoDevClient:
    """Fetches logo images (implements ILogoProvider)."""

    def __init__(self, http_client: httpx.AsyncClient, api_url: str, token: str) -> None:
        self._http = http_client
        self._api_url = api_url.rstrip("/")
        self._token = token

    def logo_url(self, domain: str) -> str:
        """Public image URL for domain (token is a publishable key)."""
        return f"{self._api_url}/{quote(domain.strip().lower(), safe='.-')}?token={self._token}"

    async def fetch_logo(self, domain: str) -> LogoImage:
        url = self.logo_url(domain)
        response = await send_platform_request(self._http, PLATFORM, "GET", url)
        if not response.content:
            raise PlatformTransportException(PLATFORM, f"Empty logo for {domain}")
        content_type = response.headers.get("content-type", "image/png").split(";")[0]
        return LogoImage(
            content=response.content,
            content_type=content_type,
            source_url=url.split("?", 1)[0],
        )
