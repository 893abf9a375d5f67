"""httpx platform clients against httpx.MockTransport."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from portcullis.application.dtos.identity import LogoImage
from portcullis.domain.exceptions import (
    PlatformTransportException,
    PlatformValidationException,
    ProvisioningException,
)
from portcullis.infrastructure.external import (
    ClerkIdentityPlatform,
    HyperlineBillingPlatform,
    LogoDevClient,
    SvixWebhookPlatform,
)


class Recorder:
    """MockTransport handler returning a canned response and keeping the requests."""

    def __init__(self, response: httpx.Response | Exception) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def body(self) -> dict:
        return json.loads(self.requests[-1].content)


def _client(recorder: Recorder) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(recorder))


async def test_clerk_create_user() -> None:
    """POST /users with bearer secret and email list."""
    recorder = Recorder(httpx.Response(200, json={"id": "user_2abc"}))
    async with _client(recorder) as client:
        clerk = ClerkIdentityPlatform(client, "https://api.clerk.com/v1", "sk_test")
        user_id = await clerk.create_user(
            "ada@acme.co", "Ada", "Lovelace", {"source": "discord_bot"}
        )
    assert user_id == "user_2abc"
    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.clerk.com/v1/users"
    assert request.headers["authorization"] == "Bearer sk_test"
    assert recorder.body == {
        "email_address": ["ada@acme.co"],
        "first_name": "Ada",
        "last_name": "Lovelace",
        "public_metadata": {"source": "discord_bot"},
    }


async def test_clerk_duplicate_email_is_validation_error() -> None:
    """A 422 keeps Clerk's first error message and code."""
    recorder = Recorder(
        httpx.Response(
            422,
            json={
                "errors": [
                    {
                        "message": "That email address is taken. Please try another.",
                        "long_message": "That email address is taken.",
                        "code": "form_identifier_exists",
                    }
                ]
            },
        )
    )
    async with _client(recorder) as client:
        clerk = ClerkIdentityPlatform(client, "https://api.clerk.com/v1", "sk_test")
        with pytest.raises(PlatformValidationException) as exc_info:
            await clerk.create_user("ada@acme.co", "Ada", "Lovelace", {})
    exc = exc_info.value
    assert exc.message == "That email address is taken. Please try another."
    assert exc.details["platform_code"] == "form_identifier_exists"
    assert exc.details["status_code"] == 422


async def test_clerk_create_organization_and_logo() -> None:
    """Organization create posts slug and metadata; logo goes up as multipart."""
    recorder = Recorder(httpx.Response(200, json={"id": "org_2xyz"}))
    async with _client(recorder) as client:
        clerk = ClerkIdentityPlatform(client, "https://api.clerk.com/v1/", "sk_test")
        org_id = await clerk.create_organization(
            "Acme Corp", "acme-corp", "user_1", {"apiKey": "pk_acme-corp_x", "source": "discord_bot"}
        )
        await clerk.update_organization_logo(
            org_id,
            LogoImage(content=b"\x89PNG", content_type="image/png", source_url="https://img.logo.dev/acme.co"),
            uploader_user_id="user_1",
        )
    create, logo = recorder.requests
    assert json.loads(create.content)["slug"] == "acme-corp"
    assert json.loads(create.content)["created_by"] == "user_1"
    assert logo.method == "PUT"
    assert str(logo.url) == "https://api.clerk.com/v1/organizations/org_2xyz/logo"
    assert logo.headers["content-type"].startswith("multipart/form-data")
    assert b'name="uploader_user_id"' in logo.content
    assert b"\x89PNG" in logo.content


async def test_clerk_missing_id_is_provisioning_error() -> None:
    """A 200 without an id is unusable."""
    recorder = Recorder(httpx.Response(200, json={}))
    async with _client(recorder) as client:
        clerk = ClerkIdentityPlatform(client, "https://api.clerk.com/v1", "sk_test")
        with pytest.raises(ProvisioningException):
            await clerk.create_user("ada@acme.co", "Ada", "Lovelace", {})


async def test_network_error_is_transport_error() -> None:
    """Connection failures map to PlatformTransportException."""
    recorder = Recorder(httpx.ConnectError("connection refused"))
    async with _client(recorder) as client:
        svix = SvixWebhookPlatform(client, "https://api.us.svix.com/api/v1", "sk_svix")
        with pytest.raises(PlatformTransportException) as exc_info:
            await svix.create_app("Acme Corp", "App for Acme Corp")
    assert exc_info.value.details["platform"] == "svix"
    assert "connection refused" in exc_info.value.details["reason"]


async def test_server_error_is_transport_error() -> None:
    """5xx responses map to PlatformTransportException with the status."""
    recorder = Recorder(httpx.Response(503, text="unavailable"))
    async with _client(recorder) as client:
        hyperline = HyperlineBillingPlatform(client, "https://api.hyperline.co/v1", "hl_key")
        with pytest.raises(PlatformTransportException) as exc_info:
            await hyperline.create_customer("Acme Corp", "corporate", "USD", "ada@acme.co")
    assert exc_info.value.details["status_code"] == 503


async def test_svix_create_app() -> None:
    """POST /app/ with name and description."""
    recorder = Recorder(httpx.Response(201, json={"id": "app_2x", "name": "Acme Corp"}))
    async with _client(recorder) as client:
        svix = SvixWebhookPlatform(client, "https://api.us.svix.com/api/v1", "sk_svix")
        app_id = await svix.create_app("Acme Corp", "App for Acme Corp")
    assert app_id == "app_2x"
    assert str(recorder.requests[0].url) == "https://api.us.svix.com/api/v1/app/"
    assert recorder.requests[0].headers["authorization"] == "Bearer sk_svix"
    assert recorder.body == {"name": "Acme Corp", "description": "App for Acme Corp"}


async def test_hyperline_create_customer_body() -> None:
    """Customer payload carries payment methods, status and reminders."""
    recorder = Recorder(httpx.Response(201, json={"id": "cus_9"}))
    async with _client(recorder) as client:
        hyperline = HyperlineBillingPlatform(client, "https://api.hyperline.co/v1", "hl_key")
        customer_id = await hyperline.create_customer("Acme Corp", "corporate", "USD", "ada@acme.co")
    assert customer_id == "cus_9"
    assert str(recorder.requests[0].url) == "https://api.hyperline.co/v1/customers"
    assert recorder.body == {
        "name": "Acme Corp",
        "type": "corporate",
        "currency": "USD",
        "billing_email": "ada@acme.co",
        "available_payment_methods": ["card", "transfer"],
        "status": "active",
        "invoice_reminders_enabled": True,
    }


async def test_hyperline_customer_without_id_returns_none() -> None:
    """A missing id is reported as None for the service to reject."""
    recorder = Recorder(httpx.Response(200, json={"name": "Acme Corp"}))
    async with _client(recorder) as client:
        hyperline = HyperlineBillingPlatform(client, "https://api.hyperline.co/v1", "hl_key")
        assert await hyperline.create_customer("Acme Corp", "corporate", "USD", "ada@acme.co") is None


async def test_hyperline_create_quote() -> None:
    """Quote expiry is sent as ISO UTC; receipt fields are read back."""
    recorder = Recorder(
        httpx.Response(201, json={"id": "quo_1", "status": "draft", "hosted_url": "https://q/1"})
    )
    expires_at = datetime(2025, 2, 14, 12, 0, tzinfo=timezone.utc)
    async with _client(recorder) as client:
        hyperline = HyperlineBillingPlatform(client, "https://api.hyperline.co/v1", "hl_key")
        receipt = await hyperline.create_quote("cus_9", 1250, "USD", expires_at)
    assert receipt.id == "quo_1"
    assert receipt.hosted_url == "https://q/1"
    assert recorder.body == {
        "customer_id": "cus_9",
        "amount": 1250,
        "currency": "USD",
        "expires_at": "2025-02-14T12:00:00.000Z",
    }


async def test_logo_fetch() -> None:
    """Logo is fetched by domain with the token as query parameter."""
    recorder = Recorder(
        httpx.Response(200, content=b"\x89PNG", headers={"content-type": "image/png; charset=binary"})
    )
    async with _client(recorder) as client:
        logos = LogoDevClient(client, "https://img.logo.dev", "pk_logo")
        logo = await logos.fetch_logo("Acme.co")
    assert str(recorder.requests[0].url) == "https://img.logo.dev/acme.co?token=pk_logo"
    assert logo.content == b"\x89PNG"
    assert logo.content_type == "image/png"
    assert logo.source_url == "https://img.logo.dev/acme.co"


async def test_empty_logo_is_rejected() -> None:
    """An empty body is never passed on as a logo."""
    recorder = Recorder(httpx.Response(200, content=b""))
    async with _client(recorder) as client:
        logos = LogoDevClient(client, "https://img.logo.dev", "pk_logo")
        with pytest.raises(PlatformTransportException):
            await logos.fetch_logo("acme.co")
