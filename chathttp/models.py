import json
import typing
from dataclasses import dataclass

U32_MAX = 2 ** 32 - 1


class DecodeError(ValueError):
    pass


def _load_object(body: str) -> dict:
    data = json.loads(body)
    if not isinstance(data, dict):
        raise DecodeError(f"expected an object, got {type(data).__name__}")
    return data


def _get(data: dict, key: str, required: bool = True):
    if key not in data:
        if required:
            raise DecodeError(f"missing field `{key}`")
        return None
    return data[key]


def _u32(key: str, value) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"`{key}` must be an integer, got {value!r}")
    if not 0 <= value <= U32_MAX:
        raise DecodeError(f"`{key}` out of range: {value}")
    return value


def _str(key: str, value) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"`{key}` must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Chat:
    """A chat session between two users."""

    participant_ids: typing.Tuple[int, int]
    id: typing.Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Chat":
        chat_id = _get(data, "id", required=False)
        if chat_id is not None:
            chat_id = _u32("id", chat_id)
        ids = _get(data, "participantIds")
        if not isinstance(ids, list) or len(ids) != 2:
            raise DecodeError(
                f"`participantIds` must be a list of two ids, got {ids!r}"
            )
        return cls(tuple(_u32("participantIds", i) for i in ids), chat_id)


@dataclass(frozen=True)
class Message:
    """A message sent through a chat session.

    ``timestamp`` is the epoch time the message was sent at.
    """

    timestamp: int
    message: str
    source_user_id: int
    destination_user_id: int
    id: typing.Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        message_id = _get(data, "id", required=False)
        if message_id is not None:
            message_id = _str("id", message_id)
        return cls(
            timestamp=_u32("timestamp", _get(data, "timestamp")),
            message=_str("message", _get(data, "message")),
            source_user_id=_u32("sourceUserId", _get(data, "sourceUserId")),
            destination_user_id=_u32(
                "destinationUserId", _get(data, "destinationUserId")
            ),
            id=message_id,
        )


def parse_chat(body: str) -> Chat:
    return Chat.from_dict(_load_object(body))


def parse_message(body: str) -> Message:
    return Message.from_dict(_load_object(body))


models = {"chat": parse_chat, "message": parse_message}
