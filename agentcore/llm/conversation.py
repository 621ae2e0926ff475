"""A conversation with role alternation and a token budget."""

from __future__ import annotations

from agentcore.llm.messages import ChatMessage, Role, RoleMessage, message_role
from agentcore.llm.tokens import estimate_tokens


class ConversationError(Exception):
    """Base error for invalid conversation edits."""


class NotSystemFirstError(ConversationError):
    """The first message of a conversation is not a system message."""


class InvalidAlternationError(ConversationError):
    """A message breaks the user/assistant alternation."""


_NEXT_ROLE = {
    Role.SYSTEM: Role.USER,
    Role.USER: Role.ASSISTANT,
    Role.ASSISTANT: Role.USER,
}


class Conversation:
    """A managed conversation whose first message is the system prompt."""

    def __init__(self, system_msg: bytes, max_context_tokens: int) -> None:
        self.messages: list[ChatMessage] = [RoleMessage(Role.SYSTEM, bytes(system_msg))]
        self.max_context_tokens = max_context_tokens

    def __repr__(self) -> str:
        return (
            f"Conversation(messages={self.messages!r}, "
            f"max_context_tokens={self.max_context_tokens!r})"
        )

    def append(self, msg: ChatMessage) -> None:
        """Append a message, enforcing system-first and role alternation.

        Tool calls count as assistant turns and tool results as user turns.
        """
        new_role = message_role(msg)
        if not self.messages:
            if new_role is not Role.SYSTEM:
                raise NotSystemFirstError("first message must be a system message")
            self.messages.append(msg)
            return
        last_role = message_role(self.messages[-1])
        if new_role is not _NEXT_ROLE[last_role]:
            raise InvalidAlternationError(
                f"{new_role.value} message cannot follow {last_role.value} message"
            )
        self.messages.append(msg)

    def trim_to_context(self) -> None:
        """Drop the oldest non-system messages until the estimate fits."""
        while len(self.messages) > 1 and estimate_tokens(self.messages) > self.max_context_tokens:
            del self.messages[1]

    def total_estimated_tokens(self) -> int:
        """Return the estimated token count of the current messages."""
        return estimate_tokens(self.messages)