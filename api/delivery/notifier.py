"""
Course-delivery email notifier.

Without SendGrid credentials the notifier is a no-op that reports `False`.
Provider failures are logged and also reported as `False`; nothing raises.
"""

from __future__ import annotations

import logging

import httpx

from core import sendgrid
from core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_NOTE = "No extra notes provided."


def build_course_email(*, to: str, course_title: str, note: str | None) -> tuple[str, str]:
    subject = f"Gold Wealth Academy access: {course_title}"
    lines = [
        f"Course delivered: {course_title}",
        f"Access link sent to {to}",
        note or DEFAULT_NOTE,
    ]
    return subject, "\n".join(lines)


class EmailNotifier:
    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def configured(self) -> bool:
        return self._settings.email_configured

    async def send_course_email(self, *, to: str, course_title: str, note: str | None = None) -> bool:
        if not self.configured:
            return False

        subject, text = build_course_email(to=to, course_title=course_title, note=note)
        try:
            await sendgrid.send_mail(
                base_url=self._settings.sendgrid_base_url,
                api_key=self._settings.sendgrid_api_key,
                to=to,
                sender=self._settings.sendgrid_sender,
                subject=subject,
                text=text,
                transport=self._transport,
            )
        except sendgrid.SendGridError as exc:
            logger.error("sendgrid_send_failed to=%s error=%s", to, exc)
            return False
        return True
