"""Hyperline API client (billing platform)."""

from __future__ import annotations

from datetime import datetime

import httpx

from portcullis.application.dtos.billing import QuoteReceipt
from portcullis.infrastructure.external._http import json_body, send_platform_request
from portcullis.shared.utils.datetime import to_iso_utc

PLATFORM = "hyperline"


class HyperlineBillingPlatform:
    """Customers and quotes in Hyperline (implements IBillingPlatform)."""

    def __init__(self, http_client: httpx.AsyncClient, api_url: str, api_key: str) -> None:
        self._http = http_client
        self._api_url = api_url.rstrip("/")
        self._api_key = api_key

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def create_customer(
        self,
        name: str,
        customer_type: str,
        currency: str,
        billing_email: str,
    ) -> str | None:
        response = await send_platform_request(
            self._http,
            PLATFORM,
            "POST",
            f"{self._api_url}/customers",
            headers=self._headers(),
            json={
                "name": name,
                "type": customer_type,
                "currency": currency,
                "billing_email": billing_email,
                "available_payment_methods": ["card", "transfer"],
                "status": "active",
                "invoice_reminders_enabled": True,
            },
        )
        customer_id = json_body(response, PLATFORM).get("id")
        return str(customer_id) if customer_id else None

    async def create_quote(
        self,
        customer_id: str,
        amount: int,
        currency: str,
        expires_at: datetime,
    ) -> QuoteReceipt:
        response = await send_platform_request(
            self._http,
            PLATFORM,
            "POST",
            f"{self._api_url}/quotes",
            headers=self._headers(),
            json={
                "customer_id": customer_id,
                "amount": amount,
                "currency": currency,
                "expires_at": to_iso_utc(expires_at),
            },
        )
        body = json_body(response, PLATFORM)
        return QuoteReceipt(
            id=body.get("id"),
            status=body.get("status"),
            hosted_url=body.get("hosted_url"),
        )
