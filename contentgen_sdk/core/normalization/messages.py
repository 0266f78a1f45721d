"""
Message normalization module.

Converts canonical content lists into the ordered ``{"role", "content"}``
message lists chat-completion backends expect, and back. Only the text
channel is carried; non-text parts degrade to empty strings.
"""

from typing import Any, Dict, List, Optional, Tuple

from ...models.content import Content, ContentListUnion, Part, Role

# Canonical role -> chat wire role
_WIRE_ROLES = {
    Role.USER.value: "user",
    Role.MODEL.value: "assistant",
    Role.ASSISTANT.value: "assistant",
    Role.SYSTEM.value: "system",
}


def normalize_contents(contents: Optional[ContentListUnion]) -> List[Content]:
    """
    Normalize any accepted content form to a list of turns.

    A bare string becomes a single ``user`` turn; a single turn becomes a
    one-element list; string items inside a list become ``user`` turns.
    """
    if contents is None:
        return []
    if isinstance(contents, (str, Content, dict)):
        contents = [contents]

    normalized = []
    for item in contents:
        if isinstance(item, str):
            normalized.append(Content.from_text(item))
        elif isinstance(item, Content):
            normalized.append(item)
        elif isinstance(item, dict):
            normalized.append(Content.model_validate(item))
        else:
            raise ValueError(f"Invalid content format: {type(item)} - {item}")
    return normalized


def part_text(part: Any) -> str:
    """Text of a single part; anything that is not text yields ``""``."""
    if isinstance(part, str):
        return part
    if isinstance(part, Part):
        return part.text or ""
    if isinstance(part, dict):
        text = part.get("text")
        return text if isinstance(text, str) else ""
    text = getattr(part, "text", None)
    return text if isinstance(text, str) else ""


def flatten_parts(content: Content) -> str:
    """Concatenate the text of every part in order, with no separator."""
    return "".join(part_text(part) for part in content.parts)


def to_wire_role(role: Optional[str]) -> str:
    """Map a canonical role to a chat wire role; a missing role means ``user``."""
    if not role:
        return "user"
    role = role.value if isinstance(role, Role) else str(role)
    return _WIRE_ROLES.get(role, role)


def from_wire_role(role: Optional[str]) -> str:
    """Map a chat wire role back to a canonical role."""
    if not role or role == "user":
        return Role.USER.value
    if role == "assistant":
        return Role.MODEL.value
    return role


def to_chat_messages(contents: Optional[ContentListUnion]) -> List[Dict[str, str]]:
    """Translate canonical contents to an ordered chat message list."""
    return [
        {"role": to_wire_role(content.role), "content": flatten_parts(content)}
        for content in normalize_contents(contents)
    ]


def from_chat_messages(messages: List[Dict[str, Any]]) -> List[Content]:
    """Translate a chat message list back to canonical turns."""
    turns = []
    for msg in messages:
        text = msg.get("content")
        turns.append(
            Content.from_text(text if isinstance(text, str) else "", role=from_wire_role(msg.get("role")))
        )
    return turns


def split_system_messages(messages: List[Dict[str, str]]) -> Tuple[Optional[str], List[Dict[str, str]]]:
    """
    Separate system messages from the conversation.

    Backends that take the system prompt as a top-level parameter get all
    system turns joined with a blank line; the remaining messages keep their
    order.
    """
    system_message = None
    conversation = []

    for msg in messages:
        if msg["role"] == "system":
            if system_message is None:
                system_message = msg["content"]
            else:
                system_message += "\n\n" + msg["content"]
        else:
            conversation.append(msg)

    return system_message, conversation


def embedding_inputs(contents: Any) -> List[str]:
    """Flatten embedding inputs to a list of strings, preserving order."""
    if isinstance(contents, (str, Content, dict)):
        contents = [contents]
    inputs = []
    for item in contents:
        if isinstance(item, str):
            inputs.append(item)
        else:
            inputs.append(flatten_parts(normalize_contents(item)[0]))
    return inputs
