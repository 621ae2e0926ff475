"""Validated construction of LLM API requests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from agentcore.llm.messages import ChatMessage, Role, message_role

MAX_TEMPERATURE = 200
"""Highest temperature accepted, fixed-point with scale 100 (2.0)."""


@dataclass(frozen=True)
class ToolDef:
    """A tool definition offered to the model."""

    name: bytes
    description: bytes
    parameters_schema: bytes


@dataclass
class Request:
    """A well-formed request. Temperature is fixed-point: 100 means 1.0."""

    model: bytes
    messages: list[ChatMessage]
    temperature: int
    max_tokens: int
    tools: list[ToolDef] = field(default_factory=list)


class RequestError(ValueError):
    """Base error for invalid requests."""


class EmptyMessagesError(RequestError):
    """The request carries no messages."""


class NoSystemMessageError(RequestError):
    """The first message is not a system message."""


class TemperatureTooHighError(RequestError):
    """The temperature exceeds 2.0."""


class MaxTokensZeroError(RequestError):
    """max_tokens is zero."""


def build_request(
    model: bytes,
    messages: Sequence[ChatMessage],
    temperature: int,
    max_tokens: int,
    tools: Sequence[ToolDef] = (),
) -> Request:
    """Validate the inputs and build a request holding copies of them."""
    if not messages:
        raise EmptyMessagesError("request has no messages")
    if message_role(messages[0]) is not Role.SYSTEM:
        raise NoSystemMessageError("first message must be a system message")
    if temperature > MAX_TEMPERATURE:
        raise TemperatureTooHighError(f"temperature {temperature} exceeds {MAX_TEMPERATURE}")
    if max_tokens == 0:
        raise MaxTokensZeroError("max_tokens must be positive")
    return Request(
        model=bytes(model),
        messages=list(messages),
        temperature=temperature,
        max_tokens=max_tokens,
        tools=list(tools),
    )