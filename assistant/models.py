from dataclasses import dataclass
from typing import Optional

from django.db import models


class Role(models.TextChoices):
    USER = "user", "User"
    ASSISTANT = "assistant", "Assistant"


@dataclass
class ChatMessage:
    role: str
    text: str
    service_id: Optional[str] = None


@dataclass(frozen=True)
class Recommendation:
    service_id: Optional[str]
    explanation: str
