"""Translation of raw terminal and HTTP inputs into application events."""

from __future__ import annotations

from agentcore.app.integration_types import (
    AppEvent,
    KeyPress,
    LlmResponseReceived,
    Quit,
    Resize,
    SwitchPane,
    Tick,
    UserSubmitMessage,
)

KEY_ENTER = 13
KEY_ESC = 27
KEY_BACKSPACE = 127
KEY_TAB = 9


def adapt_key_event(raw_key: int, modifiers: int = 0) -> AppEvent:
    """Map a key code to an event: Enter submits, Esc quits, Tab switches pane."""
    if raw_key == KEY_ENTER:
        return UserSubmitMessage()
    if raw_key == KEY_ESC:
        return Quit()
    if raw_key == KEY_TAB:
        return SwitchPane(1)
    return KeyPress(raw_key)


def adapt_resize_event(width: int, height: int) -> AppEvent:
    """Map a terminal resize to a Resize event."""
    return Resize(width, height)


def adapt_http_response(body: bytes, agent_id: int) -> AppEvent:
    """Map an HTTP response body to a response event for the agent, with content id 0."""
    return LlmResponseReceived(agent_id, 0)


def adapt_http_error(error_code: int) -> AppEvent:
    """Map an HTTP error to a Tick event."""
    return Tick()