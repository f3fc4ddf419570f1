"""
Per-process component handles shared by every router.

`create_app()` builds one `AppContext` and stores it on `app.state.ctx`;
routes reach it through the `get_context` dependency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from delivery.notifier import EmailNotifier
    from onboarding.buffer import ProgressBuffer
    from verticals.stats import VerticalStats

    from .config import Settings
    from .db import Database


@dataclass
class AppContext:
    settings: Settings
    db: Database
    stats: VerticalStats
    notifier: EmailNotifier
    progress_buffer: ProgressBuffer


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx
