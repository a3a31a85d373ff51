"""Status icons shown in prompts and tables."""

from __future__ import annotations

ICONS: dict[str, str] = {
    # pull request / attachment status
    "draft": "📋",
    "open": "💚",
    "closed": "🔴",
    "merged": "💫",
    "inReview": "💚",
    # linear state types
    "unstarted": "🌟",
    "started": "🌊",
    "completed": "🎯",
    "canceled": "🚫",
    "backlog": "📎",
    "triage": "🔍",
    # vercel deployment states
    "vercel_ready": "✨",
    "vercel_error": "💥",
    "vercel_building": "🔨",
    "vercel_queued": "⏳",
    "vercel_initializing": "⏳",
    "vercel_canceled": "🚫",
    # mihomo
    "mihomo_rule": "🔍",
    "mihomo_direct": "🚫",
    "mihomo_global": "🌍",
    "mihomo_active": "🔥",
    "mihomo_delay_good": "🟢",
    "mihomo_delay_normal": "🟡",
    "mihomo_delay_bad": "🔴",
    "mihomo_delay_very_bad": "🚫",
    "mihomo_refresh": "🔄",
    "mihomo_reset": "🔄",
}


def icon(key: str) -> str:
    return ICONS.get(key, "")
