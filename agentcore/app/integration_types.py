"""Application events and pane identifiers shared by the update and view layers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class KeyPress:
    """A key press; ``key`` is an ASCII value or a special-key code."""

    key: int


@dataclass(frozen=True)
class Resize:
    """The terminal was resized."""

    width: int
    height: int


@dataclass(frozen=True)
class UserSubmitMessage:
    """The user pressed Enter to submit the input buffer."""


@dataclass(frozen=True)
class SwitchPane:
    """Move focus to the pane with this numeric id."""

    pane_id: int


@dataclass(frozen=True)
class SwitchAgent:
    """Select the agent shown in the status panel."""

    agent_id: int


@dataclass(frozen=True)
class AgentEvent:
    """An event originating from a specific agent."""

    agent_id: int
    code: int


@dataclass(frozen=True)
class OrchestratorTick:
    """The orchestrator's periodic heartbeat."""


@dataclass(frozen=True)
class LlmResponseReceived:
    """An LLM response arrived for an agent."""

    agent_id: int
    content_id: int


@dataclass(frozen=True)
class ToolResultReceived:
    """A tool call completed for an agent."""

    agent_id: int
    tool_id: int
    content_id: int


@dataclass(frozen=True)
class Tick:
    """A generic timer tick."""


@dataclass(frozen=True)
class Quit:
    """Graceful shutdown."""


AppEvent = Union[
    KeyPress,
    Resize,
    UserSubmitMessage,
    SwitchPane,
    SwitchAgent,
    AgentEvent,
    OrchestratorTick,
    LlmResponseReceived,
    ToolResultReceived,
    Tick,
    Quit,
]


class PaneId(enum.Enum):
    """The four application panes; values are their numeric ids."""

    CHAT_INPUT = 0
    CONVERSATION_VIEW = 1
    AGENT_STATUS_PANEL = 2
    DEBUG_REASONING_PANEL = 3


def pane_from_id(value: int) -> Optional[PaneId]:
    """Return the pane with this numeric id, or None if it is out of range."""
    try:
        return PaneId(value)
    except ValueError:
        return None