"""Small conversions between the UI, orchestrator and conversation vocabularies."""

from __future__ import annotations

from agentcore.app.app_state import ROLE_ASSISTANT, ROLE_USER, ConversationEntry

PANE_COUNT = 4
"""Number of defined panes."""

USER_ID = 0xFFFFFFFF
"""Reserved sender id meaning the human user."""


def user_input_to_message(content_id: int, coordinator_id: int) -> tuple[int, int, int]:
    """Return the ``(sender, recipient, content_id)`` triple for a user submission."""
    return USER_ID, coordinator_id, content_id


def message_to_conversation_entry(sender: int, content_id: int, timestamp: int) -> ConversationEntry:
    """Build a conversation entry; the role is user for the user id, else assistant."""
    role = ROLE_USER if sender == USER_ID else ROLE_ASSISTANT
    return ConversationEntry(agent_id=sender, role=role, content_id=content_id, timestamp=timestamp)


def is_valid_pane_id(pane_id: int) -> bool:
    """Does the numeric id name one of the panes?"""
    return 0 <= pane_id < PANE_COUNT


def is_valid_agent_id(agent_id: int, agent_count: int) -> bool:
    """Is the agent id within ``[0, agent_count)``?"""
    return 0 <= agent_id < agent_count