from dataclasses import asdict

from django.conf import settings

from services.catalog import get_catalog

from .models import ChatMessage, Role
from .recommender import recommend

SESSION_KEY = "chat"

GREETING = "Hi! I'm Sparky ⚡. Describe your electrical issue, and I'll suggest the right fix!"


def _greeting():
    return ChatMessage(role=Role.ASSISTANT.value, text=GREETING)


class ChatSession:
    def __init__(self, messages=None):
        self.messages = list(messages) if messages else [_greeting()]

    @classmethod
    def from_session(cls, session):
        messages = []
        for raw in session.get(SESSION_KEY) or []:
            if not isinstance(raw, dict) or raw.get("role") not in Role.values:
                continue
            messages.append(ChatMessage(
                role=raw["role"],
                text=str(raw.get("text", "")),
                service_id=raw.get("service_id"),
            ))
        return cls(messages)

    def save(self, session):
        limit = getattr(settings, "CHAT_HISTORY_LIMIT", 50)
        messages = self.messages[-limit:] if limit > 0 else []
        session[SESSION_KEY] = [asdict(m) for m in messages]

    def reset(self):
        self.messages = [_greeting()]

    def send(self, text, recommender=None, catalog=None):
        """
        Record the user's message, ask for a recommendation and record the
        reply. A recommended service gets its own message carrying the
        service id, so booking from the chat never has to parse display text.
        Returns the new assistant messages.
        """
        text = (text or "").strip()
        if not text:
            raise ValueError("Message cannot be empty")
        if recommender is None:
            recommender = recommend
        if catalog is None:
            catalog = get_catalog()

        self.messages.append(ChatMessage(role=Role.USER.value, text=text))
        recommendation = recommender(text)

        replies = [ChatMessage(role=Role.ASSISTANT.value, text=recommendation.explanation)]
        service = catalog.get(recommendation.service_id) if recommendation.service_id else None
        if service:
            replies.append(ChatMessage(
                role=Role.ASSISTANT.value,
                text=f"Recommendation: **{service.name}** - ₹{service.price}",
                service_id=service.id,
            ))
        self.messages.extend(replies)
        return replies

    def recommended_ids(self):
        return [m.service_id for m in self.messages if m.service_id]
