"""
Reply messages shown to actors.

Built-in English texts, optionally replaced per key by the ``messages``
section of the configuration. ``{time}`` and ``{name}`` are the only
placeholders.
"""

import math

DEFAULT_MESSAGES: dict[str, str] = {
    "detected": "⚠️ Players detected nearby!",
    "clear": "✅ Area is clear.",
    "cooldown_started": "🔁 Cooldown started. You can scan again in {time}.",
    "cooldown_left": "⏳ Scan is on cooldown. Time left: {time}.",
    "cooldown_ended": "✅ Cooldown expired. You can scan again.",
    "no_permission": "You do not have permission to use this.",
    "admin_only": "This command is for admins only.",
    "not_found": "Target player not found (online).",
    "test_header": "🔧 Test scan from {name}:",
}

SCAN_FOR_USAGE = "Usage: /scan.for <idOrName>"


def format_duration(seconds: float) -> str:
    """Render seconds as ``"<m>m <s>s"``, both parts floored."""
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes}m {secs}s"


class MessageCatalog:
    """Lookup of reply texts with configuration overrides applied."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._messages = dict(DEFAULT_MESSAGES)
        for key, text in (overrides or {}).items():
            if key in self._messages and text:
                self._messages[key] = text

    def get(self, key: str) -> str:
        # Unknown keys echo back, like a missing translation would
        return self._messages.get(key, key)

    def with_time(self, key: str, seconds: float) -> str:
        return self.get(key).replace("{time}", format_duration(seconds))

    def with_name(self, key: str, name: str) -> str:
        return self.get(key).replace("{name}", name)

    def verdict(self, found: bool) -> str:
        return self.get("detected" if found else "clear")
