"""The unified application state: UI, orchestration bookkeeping and conversation log."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from agentcore.app.integration_types import PaneId

ROLE_USER = 0
ROLE_ASSISTANT = 1
ROLE_SYSTEM = 2


@dataclass(frozen=True)
class ConversationEntry:
    """One entry in the conversation log.

    ``role`` is 0 for user, 1 for assistant and 2 for system.
    """

    agent_id: int
    role: int
    content_id: int
    timestamp: int


@dataclass
class AppState:
    """The complete application state, changed only through the update function."""

    agent_count: int
    turn_budget: int
    active_pane: PaneId = PaneId.CHAT_INPUT
    selected_agent: int = 0
    debug_visible: bool = False
    running: bool = True
    input_buffer: bytearray = field(default_factory=bytearray)
    conversations: list[ConversationEntry] = field(default_factory=list)
    turn_count: int = 0
    message_queue: list[tuple[int, int, int]] = field(default_factory=list)
    error_message: Optional[int] = None
    next_timestamp: int = 0