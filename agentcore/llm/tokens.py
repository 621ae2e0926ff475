"""Heuristic token estimation for chat messages."""

from __future__ import annotations

from collections.abc import Iterable

from agentcore.llm.messages import ChatMessage, message_content

BYTES_PER_TOKEN = 4
"""Approximate bytes per token for English text."""

MESSAGE_OVERHEAD = 4
"""Per-message overhead in tokens (role tags, separators)."""


def estimate_tokens_single(msg: ChatMessage) -> int:
    """Estimate tokens for one message: len(content) // 4 + overhead."""
    return len(message_content(msg)) // BYTES_PER_TOKEN + MESSAGE_OVERHEAD


def estimate_tokens(messages: Iterable[ChatMessage]) -> int:
    """Sum the single-message estimate over all messages."""
    return sum(estimate_tokens_single(msg) for msg in messages)