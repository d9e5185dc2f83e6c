from enum import Enum

from pydantic import BaseModel


class MessageType(str, Enum):
    INFO = "INFO"
    ERROR = "ERROR"


class Message(BaseModel):
    """Status line shown to the user; also the body of every Ajax response."""

    type: MessageType
    text: str

    @classmethod
    def info(cls, text: str) -> "Message":
        return cls(type=MessageType.INFO, text=text)

    @classmethod
    def error(cls, text: str) -> "Message":
        return cls(type=MessageType.ERROR, text=text)

    @property
    def is_error(self) -> bool:
        return self.type is MessageType.ERROR
