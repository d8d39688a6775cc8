from typing import Optional, Sequence

from app.core.utils.canned_replies import (
    CHAT_FALLBACK,
    CHAT_REPLIES,
    VOICE_COMMANDS,
    VOICE_FALLBACK,
    CannedReply,
)


class MockResponder:
    """Keyword lookup standing in for an assistant.

    Entries are evaluated in table order against the lower-cased input and the
    first entry with a keyword substring match wins, even when later entries
    would also match. ``fallback`` is returned when nothing matches.
    """

    def __init__(self, replies: Sequence[CannedReply], fallback: CannedReply):
        self.replies = tuple(replies)
        self.fallback = fallback

    def match(self, utterance: Optional[str]) -> Optional[CannedReply]:
        text = (utterance or "").lower()
        for entry in self.replies:
            if entry.matches(text):
                return entry
        return None

    def respond(self, utterance: Optional[str]) -> CannedReply:
        return self.match(utterance) or self.fallback


chat_responder = MockResponder(CHAT_REPLIES, CHAT_FALLBACK)
voice_responder = MockResponder(VOICE_COMMANDS, VOICE_FALLBACK)
