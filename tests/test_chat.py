import pytest

from assistant.chat import GREETING, SESSION_KEY, ChatSession
from assistant.models import Recommendation, Role
from assistant.recommender import FALLBACK_EXPLANATION


def test_new_session_starts_with_greeting():
    chat = ChatSession()
    assert len(chat.messages) == 1
    assert chat.messages[0].role == Role.ASSISTANT
    assert chat.messages[0].text == GREETING


def test_send_with_recommendation_carries_service_id(catalog):
    chat = ChatSession()
    replies = chat.send(
        "water dripping from my tap",
        recommender=lambda text: Recommendation("pl-1", "Sounds like a worn spindle."),
        catalog=catalog,
    )

    assert [m.text for m in replies] == [
        "Sounds like a worn spindle.",
        "Recommendation: **Tap & Mixer Repair** - ₹199",
    ]
    assert replies[1].service_id == "pl-1"
    assert chat.messages[1].role == Role.USER
    assert chat.recommended_ids() == ["pl-1"]


def test_send_without_recommendation(catalog):
    chat = ChatSession()
    replies = chat.send(
        "hello",
        recommender=lambda text: Recommendation(None, FALLBACK_EXPLANATION),
        catalog=catalog,
    )
    assert len(replies) == 1
    assert replies[0].service_id is None
    assert chat.recommended_ids() == []


def test_send_blank_message_is_rejected():
    chat = ChatSession()
    with pytest.raises(ValueError):
        chat.send("   ", recommender=lambda text: None)
    assert len(chat.messages) == 1


def test_send_uses_fallback_when_assistant_is_unavailable(catalog, settings):
    settings.OPENAI_API_KEY = ""
    chat = ChatSession()
    replies = chat.send("my geyser is cold", catalog=catalog)
    assert [m.text for m in replies] == [FALLBACK_EXPLANATION]


def test_session_round_trip_and_limit(catalog, settings):
    settings.CHAT_HISTORY_LIMIT = 3
    session = {}
    chat = ChatSession()
    chat.send("tap", recommender=lambda text: Recommendation("pl-1", "Fix it."), catalog=catalog)
    chat.save(session)

    assert len(session[SESSION_KEY]) == 3
    restored = ChatSession.from_session(session)
    assert [m.text for m in restored.messages] == [m.text for m in chat.messages[-3:]]
    assert restored.recommended_ids() == ["pl-1"]


def test_zero_limit_keeps_no_history(catalog, settings):
    settings.CHAT_HISTORY_LIMIT = 0
    session = {}
    chat = ChatSession()
    chat.send("tap", recommender=lambda text: Recommendation("pl-1", "Fix it."), catalog=catalog)
    chat.save(session)

    assert session[SESSION_KEY] == []
    assert [m.text for m in ChatSession.from_session(session).messages] == [GREETING]


def test_reset():
    chat = ChatSession()
    chat.messages.append(chat.messages[0])
    chat.reset()
    assert [m.text for m in chat.messages] == [GREETING]
