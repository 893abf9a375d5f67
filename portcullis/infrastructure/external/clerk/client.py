"""Clerk Backend API client (identity platform).

Implements IIdentityPlatform over the REST API with a Bearer secret key.
"""

from __future__ import annotations

from typing import Any

import httpx

from portcullis.application.dtos.identity import LogoImage
from portcullis.domain.exceptions import ProvisioningException
from portcullis.infrastructure.external._http import json_body, send_platform_request

PLATFORM = "clerk"


class ClerkIdentityPlatform:
    """Users and organizations in Clerk."""

    def __init__(self, http_client: httpx.AsyncClient, api_url: str, secret_key: str) -> None:
        self._http = http_client
        self._api_url = api_url.rstrip("/")
        self._secret_key = secret_key

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._secret_key}"}

    async def create_user(
        self,
        email: str,
        first_name: str,
        last_name: str,
        public_metadata: dict[str, Any],
    ) -> str:
        response = await send_platform_request(
            self._http,
            PLATFORM,
            "POST",
            f"{self._api_url}/users",
            headers=self._headers(),
            json={
                "email_address": [email],
                "first_name": first_name,
                "last_name": last_name,
                "public_metadata": public_metadata,
            },
        )
        return self._require_id(json_body(response, PLATFORM), "user")

    async def create_organization(
        self,
        name: str,
        slug: str,
        created_by: str,
        public_metadata: dict[str, Any],
    ) -> str:
        response = await send_platform_request(
            self._http,
            PLATFORM,
            "POST",
            f"{self._api_url}/organizations",
            headers=self._headers(),
            json={
                "name": name,
                "slug": slug,
                "created_by": created_by,
                "public_metadata": public_metadata,
            },
        )
        return self._require_id(json_body(response, PLATFORM), "organization")

    async def update_organization_logo(
        self, organization_id: str, logo: LogoImage, uploader_user_id: str
    ) -> None:
        await send_platform_request(
            self._http,
            PLATFORM,
            "PUT",
            f"{self._api_url}/organizations/{organization_id}/logo",
            headers=self._headers(),
            data={"uploader_user_id": uploader_user_id},
            files={"file": ("logo", logo.content, logo.content_type)},
        )

    @staticmethod
    def _require_id(body: dict[str, Any], resource: str) -> str:
        resource_id = body.get("id")
        if not resource_id:
            raise ProvisioningException(PLATFORM, f"Clerk returned no {resource} id")
        return str(resource_id)
