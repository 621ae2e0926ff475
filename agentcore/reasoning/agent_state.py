"""The agent lifecycle as a deterministic state machine."""

from __future__ import annotations

import enum
from typing import Optional


class AgentPhase(enum.Enum):
    """The seven phases of the agent lifecycle."""

    IDLE = "idle"
    THINKING = "thinking"
    CALLING_TOOL = "calling_tool"
    AWAITING_TOOL_RESULT = "awaiting_tool_result"
    COMPOSING = "composing"
    DONE = "done"
    ERROR = "error"


class AgentEvent(enum.Enum):
    """External stimuli that drive the agent."""

    USER_MESSAGE = "user_message"
    LLM_RESPONSE = "llm_response"
    TOOL_CALL_NEEDED = "tool_call_needed"
    TOOL_RESULT = "tool_result"
    TIMEOUT = "timeout"
    CANCEL = "cancel"
    COMPOSE_DONE = "compose_done"
    THINKING_DONE = "thinking_done"


class AgentAction(enum.Enum):
    """Observable outputs produced by transitions."""

    SEND_TO_LLM = "send_to_llm"
    EXECUTE_TOOL = "execute_tool"
    EMIT_RESPONSE = "emit_response"
    LOG_ENTRY = "log_entry"
    NOOP = "noop"


_TRANSITIONS: dict[tuple[AgentPhase, AgentEvent], tuple[AgentPhase, AgentAction]] = {
    (AgentPhase.IDLE, AgentEvent.USER_MESSAGE): (AgentPhase.THINKING, AgentAction.SEND_TO_LLM),
    (AgentPhase.THINKING, AgentEvent.LLM_RESPONSE): (AgentPhase.COMPOSING, AgentAction.NOOP),
    (AgentPhase.THINKING, AgentEvent.TOOL_CALL_NEEDED): (
        AgentPhase.CALLING_TOOL,
        AgentAction.EXECUTE_TOOL,
    ),
    (AgentPhase.THINKING, AgentEvent.THINKING_DONE): (AgentPhase.COMPOSING, AgentAction.NOOP),
    (AgentPhase.CALLING_TOOL, AgentEvent.TOOL_RESULT): (
        AgentPhase.AWAITING_TOOL_RESULT,
        AgentAction.NOOP,
    ),
    (AgentPhase.AWAITING_TOOL_RESULT, AgentEvent.TOOL_RESULT): (
        AgentPhase.THINKING,
        AgentAction.SEND_TO_LLM,
    ),
    (AgentPhase.COMPOSING, AgentEvent.COMPOSE_DONE): (AgentPhase.DONE, AgentAction.EMIT_RESPONSE),
}

_ABORT_EVENTS = frozenset({AgentEvent.CANCEL, AgentEvent.TIMEOUT})


def is_terminal(phase: AgentPhase) -> bool:
    """Is the phase terminal (Done or Error)?"""
    return phase in (AgentPhase.DONE, AgentPhase.ERROR)


def agent_transition(
    phase: AgentPhase, event: AgentEvent
) -> Optional[tuple[AgentPhase, AgentAction]]:
    """Return ``(next_phase, action)`` for a valid transition, else None.

    Terminal phases reject every event; Cancel and Timeout move any other
    phase to Error.
    """
    if is_terminal(phase):
        return None
    result = _TRANSITIONS.get((phase, event))
    if result is not None:
        return result
    if event in _ABORT_EVENTS:
        return AgentPhase.ERROR, AgentAction.LOG_ENTRY
    return None