from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CannedReply:
    """A fixed reply picked when any of ``keywords`` occurs in the input."""

    keywords: Tuple[str, ...]
    message: str
    action: Optional[str] = None
    speak: Optional[str] = None

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


# Order matters: the first entry with a matching keyword wins.
CHAT_REPLIES: Tuple[CannedReply, ...] = (
    CannedReply(
        keywords=("hello", "hey", "good morning", "good evening"),
        message="Hello! I'm TreloarAI, your call screening assistant. How can I help you today?",
    ),
    CannedReply(
        keywords=("status",),
        message="All systems are running. Call screening is active and your trusted contacts always ring through.",
    ),
    CannedReply(
        keywords=("urgent", "emergency"),
        message="Urgent calls are flagged in red on your dashboard and trigger an immediate notification.",
    ),
    CannedReply(
        keywords=("block", "spam", "robocall", "telemarket"),
        message="Blocked numbers are rejected automatically. Add a number from the Block Management panel.",
    ),
    CannedReply(
        keywords=("whitelist", "trusted", "contact"),
        message="Trusted contacts skip screening entirely. You can add family, doctors and colleagues from the dashboard.",
    ),
    CannedReply(
        keywords=("billing", "bill", "cost", "usage", "credit"),
        message="Your usage is tracked per message, voice command and screened call. Check the usage panel for this month's total.",
    ),
    CannedReply(
        keywords=("setting", "configure", "mode"),
        message="You can switch screening mode, urgent threshold and notification level in the AI Settings panel.",
    ),
    CannedReply(
        keywords=("help",),
        message="Ask me about call status, urgent calls, blocked numbers, trusted contacts, billing or settings.",
    ),
)

CHAT_FALLBACK = CannedReply(
    keywords=(),
    message="I'm not sure how to help with that yet. Try asking about call status, blocked numbers, trusted contacts or billing.",
)


VOICE_COMMANDS: Tuple[CannedReply, ...] = (
    CannedReply(
        keywords=("urgent",),
        message="Showing urgent calls",
        action="show_urgent_calls",
        speak="Here are your urgent calls.",
    ),
    CannedReply(
        keywords=("block",),
        message="Showing blocked numbers",
        action="show_blocked",
        speak="Opening your blocked numbers.",
    ),
    CannedReply(
        keywords=("contact", "whitelist", "trusted"),
        message="Showing trusted contacts",
        action="show_contacts",
        speak="Here are your trusted contacts.",
    ),
    CannedReply(
        keywords=("history", "recent call", "calls"),
        message="Showing recent calls",
        action="show_call_history",
        speak="Here is your recent call activity.",
    ),
    CannedReply(
        keywords=("stat", "analytics", "summary"),
        message="Showing today's statistics",
        action="show_stats",
        speak="Here are today's statistics.",
    ),
    CannedReply(
        keywords=("setting",),
        message="Opening settings",
        action="open_settings",
    ),
    CannedReply(
        keywords=("refresh", "reload"),
        message="Refreshing dashboard",
        action="refresh_dashboard",
    ),
    CannedReply(
        keywords=("help", "what can you do"),
        message="Available commands: urgent calls, blocked numbers, contacts, call history, stats, settings, refresh",
        action="help",
        speak="You can ask for urgent calls, blocked numbers, contacts, call history, stats, settings, or refresh.",
    ),
)

VOICE_FALLBACK = CannedReply(
    keywords=(),
    message="Command not recognized. Say 'help' to hear the available commands.",
)
