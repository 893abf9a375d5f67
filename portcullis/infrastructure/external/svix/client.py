"""Svix API client (webhook-delivery platform)."""

from __future__ import annotations

import httpx

from portcullis.infrastructure.external._http import json_body, send_platform_request

PLATFORM = "svix"


class SvixWebhookPlatform:
    """Applications in Svix (implements IWebhookAppPlatform)."""

    def __init__(self, http_client: httpx.AsyncClient, api_url: str, api_key: str) -> None:
        self._http = http_client
        self._api_url = api_url.rstrip("/")
        self._api_key = api_key

    async def create_app(self, name: str, description: str) -> str:
        response = await send_platform_request(
            self._http,
            PLATFORM,
            "POST",
            f"{self._api_url}/app/",
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            json={"name": name, "description": description},
        )
        return str(json_body(response, PLATFORM).get("id") or "")
