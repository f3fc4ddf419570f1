"""
Static onboarding catalog. Order is the recommended sequence.
"""

from __future__ import annotations

ONBOARDING_STEPS: tuple[dict, ...] = (
    {
        "id": "claim-workspace",
        "title": "Claim your Bizflow workspace",
        "description": (
            "Create an Experience Agent account, verify your email, and link your Supabase "
            "project so you can see interactions in one dashboard."
        ),
        "actions": ("/api/agent", "/api/onboarding/steps"),
        "icon": "🗝️",
    },
    {
        "id": "configure-agent",
        "title": "Configure your concierge agent",
        "description": (
            "Define tone, personas, and default replies so the agent feels like part of your "
            "brand. Every change is stored in Supabase for analytics."
        ),
        "actions": ("/api/interactions", "/api/dashboard/summary"),
        "icon": "🤖",
    },
    {
        "id": "invite-team",
        "title": "Invite your team & stakeholders",
        "description": (
            "Share progress links, onboarding data, and dashboards with your customer success "
            "or ops leads so everyone knows how experiences perform."
        ),
        "actions": ("/api/onboarding/progress", "/api/dashboard/summary"),
        "icon": "🌐",
    },
    {
        "id": "measure-and-iterate",
        "title": "Measure, learn, repeat",
        "description": (
            "Pull consolidated metrics from the dashboard, celebrate wins, and push new prompts "
            "when the experience needs a boost."
        ),
        "actions": ("/api/dashboard/summary",),
        "icon": "📊",
    },
)


def list_steps() -> list[dict]:
    # Fresh copies so callers cannot mutate the catalog.
    return [{**step, "actions": list(step["actions"])} for step in ONBOARDING_STEPS]
