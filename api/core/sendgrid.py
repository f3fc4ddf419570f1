"""
SendGrid HTTP client helpers.

Used endpoints:
- POST /v3/mail/send  -> 202 Accepted with an empty body
"""

from __future__ import annotations

from typing import Any

import httpx


# SendGrid failures are explicit and separable from other runtime errors.
class SendGridError(RuntimeError):
    pass


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise SendGridError("SENDGRID_BASE_URL is empty.")
    return base_url.rstrip("/")


def build_mail_payload(*, to: str, sender: str, subject: str, text: str) -> dict[str, Any]:
    return {
        "personalizations": [{"to": [{"email": to}]}],
        "from": {"email": sender},
        "subject": subject,
        "content": [{"type": "text/plain", "value": text}],
    }


async def send_mail(
    *,
    base_url: str,
    api_key: str,
    to: str,
    sender: str,
    subject: str,
    text: str,
    timeout_s: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """
    Send one plain-text message through the v3 Mail Send API.
    """
    base_url = _normalize_base_url(base_url)
    api_key = (api_key or "").strip()
    if not api_key:
        raise SendGridError("SendGrid API key is empty.")

    payload = build_mail_payload(to=to, sender=sender, subject=subject, text=text)
    headers = {"Authorization": f"Bearer {api_key}"}

    try:
        async with httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_s,
            transport=transport,
        ) as client:
            resp = await client.post("/v3/mail/send", json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise SendGridError(f"SendGrid request failed: {exc}") from exc

    if resp.status_code not in (200, 202):
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:500]
        raise SendGridError(f"SendGrid mail send failed: {resp.status_code} {body}")
