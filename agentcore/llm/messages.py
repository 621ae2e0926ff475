"""Chat message types and helpers for extracting role and content."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class Role(enum.Enum):
    """Roles in a chat conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ToolCallInfo:
    """A tool invocation requested by the assistant."""

    id: bytes
    function_name: bytes
    arguments: bytes


@dataclass(frozen=True)
class ToolResultInfo:
    """The output of executing a tool."""

    tool_call_id: bytes
    content: bytes


@dataclass(frozen=True)
class RoleMessage:
    """A plain message carrying a role and content bytes."""

    role: Role
    content: bytes


@dataclass(frozen=True)
class ToolCall:
    """The assistant asking for a tool to be run."""

    info: ToolCallInfo


@dataclass(frozen=True)
class ToolResult:
    """The result of a tool run, fed back into the conversation."""

    info: ToolResultInfo


ChatMessage = Union[RoleMessage, ToolCall, ToolResult]


def message_role(msg: ChatMessage) -> Role:
    """Return the logical role of a message.

    Tool calls count as the assistant; tool results count as the user side.
    """
    match msg:
        case RoleMessage(role=role):
            return role
        case ToolCall():
            return Role.ASSISTANT
        case ToolResult():
            return Role.USER
    raise TypeError(f"not a chat message: {msg!r}")


def message_content(msg: ChatMessage) -> bytes:
    """Return the content bytes of a message, as used for token estimation."""
    match msg:
        case RoleMessage(content=content):
            return content
        case ToolCall(info=info):
            return info.arguments
        case ToolResult(info=info):
            return info.content
    raise TypeError(f"not a chat message: {msg!r}")