"""Value objects exchanged with chat completion providers."""

from dataclasses import dataclass
from typing import Literal

Role = Literal["system", "user", "assistant"]


@dataclass
class ChatMessage:
    """One message of a conversation."""

    role: Role
    content: str


@dataclass
class ChatCompletion:
    """Provider reply to a chat completion request."""

    content: str
    tokens_used: int = 0
    model: str = ""
