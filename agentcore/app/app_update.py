"""The pure update function: applies one application event to a state."""

from __future__ import annotations

from dataclasses import replace

from agentcore.app.app_state import ROLE_ASSISTANT, ROLE_SYSTEM, AppState, ConversationEntry
from agentcore.app.integration_types import (
    AgentEvent,
    AppEvent,
    KeyPress,
    LlmResponseReceived,
    OrchestratorTick,
    PaneId,
    Quit,
    Resize,
    SwitchAgent,
    SwitchPane,
    Tick,
    ToolResultReceived,
    UserSubmitMessage,
    pane_from_id,
)
from agentcore.app.message_bridge import (
    USER_ID,
    is_valid_agent_id,
    is_valid_pane_id,
    message_to_conversation_entry,
    user_input_to_message,
)

_BACKSPACE_KEYS = frozenset({8, 127})
_ASCII_LIMIT = 128
_COORDINATOR_ID = 0


def _clone(state: AppState) -> AppState:
    """Copy the state so that the result shares no mutable parts with the input."""
    return replace(
        state,
        input_buffer=bytearray(state.input_buffer),
        conversations=list(state.conversations),
        message_queue=list(state.message_queue),
    )


def _append_entry(state: AppState, agent_id: int, role: int, content_id: int) -> None:
    state.conversations.append(
        ConversationEntry(
            agent_id=agent_id,
            role=role,
            content_id=content_id,
            timestamp=state.next_timestamp,
        )
    )
    state.next_timestamp += 1


def _handle_keypress(state: AppState, key: int) -> AppState:
    new_state = _clone(state)
    if state.active_pane is PaneId.CHAT_INPUT:
        if key in _BACKSPACE_KEYS:
            if new_state.input_buffer:
                new_state.input_buffer.pop()
        elif 0 <= key < _ASCII_LIMIT:
            new_state.input_buffer.append(key)
    return new_state


def _handle_submit(state: AppState) -> AppState:
    new_state = _clone(state)
    if not state.input_buffer:
        return new_state
    content_id = new_state.next_timestamp
    new_state.conversations.append(
        message_to_conversation_entry(USER_ID, content_id, new_state.next_timestamp)
    )
    new_state.next_timestamp += 1
    new_state.message_queue.append(user_input_to_message(content_id, _COORDINATOR_ID))
    new_state.input_buffer.clear()
    new_state.error_message = None
    return new_state


def _handle_switch_pane(state: AppState, pane_id: int) -> AppState:
    new_state = _clone(state)
    if is_valid_pane_id(pane_id):
        pane = pane_from_id(pane_id)
        if pane is not None:
            new_state.active_pane = pane
    return new_state


def _handle_switch_agent(state: AppState, agent_id: int) -> AppState:
    new_state = _clone(state)
    if is_valid_agent_id(agent_id, state.agent_count):
        new_state.selected_agent = agent_id
    return new_state


def _handle_orchestrator_tick(state: AppState) -> AppState:
    new_state = _clone(state)
    if new_state.turn_count >= new_state.turn_budget:
        return new_state
    new_state.turn_count += 1
    if new_state.message_queue:
        sender, _recipient, content_id = new_state.message_queue.pop(0)
        _append_entry(new_state, sender, ROLE_SYSTEM, content_id)
    return new_state


def _handle_response(state: AppState, agent_id: int, content_id: int) -> AppState:
    new_state = _clone(state)
    _append_entry(new_state, agent_id, ROLE_ASSISTANT, content_id)
    return new_state


def app_update(state: AppState, event: AppEvent) -> AppState:
    """Return the state that results from applying ``event``; the input is left untouched."""
    match event:
        case KeyPress(key=key):
            return _handle_keypress(state, key)
        case Resize():
            return _clone(state)
        case UserSubmitMessage():
            return _handle_submit(state)
        case SwitchPane(pane_id=pane_id):
            return _handle_switch_pane(state, pane_id)
        case SwitchAgent(agent_id=agent_id):
            return _handle_switch_agent(state, agent_id)
        case AgentEvent():
            return _clone(state)
        case OrchestratorTick():
            return _handle_orchestrator_tick(state)
        case LlmResponseReceived(agent_id=agent_id, content_id=content_id):
            return _handle_response(state, agent_id, content_id)
        case ToolResultReceived(agent_id=agent_id, content_id=content_id):
            return _handle_response(state, agent_id, content_id)
        case Tick():
            return _clone(state)
        case Quit():
            new_state = _clone(state)
            new_state.running = False
            return new_state
    raise TypeError(f"not an application event: {event!r}")