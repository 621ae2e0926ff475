"""The pure view function: renders an application state to a flat list of cells."""

from __future__ import annotations

from dataclasses import dataclass, field

from agentcore.app.app_state import ROLE_ASSISTANT, ROLE_USER, AppState
from agentcore.app.integration_types import PaneId

_MIN_SIZE = 4


@dataclass(frozen=True)
class ViewCell:
    """One character at a screen position."""

    x: int
    y: int
    ch: int


@dataclass
class ViewTree:
    """The complete rendered output as a flat list of cells."""

    cells: list[ViewCell] = field(default_factory=list)


def _label(base: bytes, active: bool) -> bytes:
    return base[:-1] + b"]*" if active else base


def _write_label(cells: list[ViewCell], ox: int, oy: int, label: bytes, max_w: int) -> None:
    cells.extend(ViewCell(ox + i, oy, ch) for i, ch in enumerate(label[:max(max_w, 0)]))


def _digit(value: int) -> int:
    return ord("0") + value % 10


def _render_conversation(
    state: AppState, cells: list[ViewCell], ox: int, oy: int, w: int, h: int
) -> None:
    active = state.active_pane is PaneId.CONVERSATION_VIEW
    _write_label(cells, ox, oy, _label(b"[Conversation]", active), w)

    max_rows = max(h - 1, 0)
    start = max(len(state.conversations) - max_rows, 0)
    for i, entry in enumerate(state.conversations[start:]):
        row = oy + 1 + i
        if row >= oy + h:
            break
        if entry.role == ROLE_USER:
            tag = ord("U")
        elif entry.role == ROLE_ASSISTANT:
            tag = ord("A")
        else:
            tag = ord("S")
        cells.append(ViewCell(ox, row, tag))
        cells.append(ViewCell(ox + 1, row, _digit(entry.agent_id)))
        cells.append(ViewCell(ox + 2, row, ord(":")))


def _render_input(state: AppState, cells: list[ViewCell], ox: int, oy: int, w: int) -> None:
    active = state.active_pane is PaneId.CHAT_INPUT
    _write_label(cells, ox, oy, _label(b"[Input]", active), w)
    cells.extend(
        ViewCell(ox + i, oy + 1, ch) for i, ch in enumerate(bytes(state.input_buffer)[:max(w, 0)])
    )


def _render_agent_status(
    state: AppState, cells: list[ViewCell], ox: int, oy: int, w: int, h: int
) -> None:
    active = state.active_pane is PaneId.AGENT_STATUS_PANEL
    _write_label(cells, ox, oy, _label(b"[Agents]", active), w)
    for i in range(state.agent_count):
        row = oy + 1 + i
        if row >= oy + h:
            break
        marker = ord(">") if i == state.selected_agent else ord(" ")
        cells.append(ViewCell(ox, row, marker))
        cells.append(ViewCell(ox + 1, row, _digit(i)))


def _render_debug(state: AppState, cells: list[ViewCell], ox: int, oy: int, w: int) -> None:
    if not state.debug_visible:
        _write_label(cells, ox, oy, b"[Debug: hidden]", w)
        return
    active = state.active_pane is PaneId.DEBUG_REASONING_PANEL
    _write_label(cells, ox, oy, _label(b"[Debug]", active), w)


def app_view(state: AppState, width: int, height: int) -> ViewTree:
    """Render the state into cells for a screen of the given size.

    The left two thirds hold the conversation (top three quarters) and the
    input (below it); the right third holds the agent status (top half) and
    the debug panel. A screen smaller than 4x4 renders nothing.
    """
    cells: list[ViewCell] = []
    if width < _MIN_SIZE or height < _MIN_SIZE:
        return ViewTree(cells)

    left_w = (width * 2) // 3
    right_w = width - left_w
    top_h = (height * 3) // 4
    right_top_h = height // 2

    _render_conversation(state, cells, 0, 0, left_w, top_h)
    _render_input(state, cells, 0, top_h, left_w)
    _render_agent_status(state, cells, left_w, 0, right_w, right_top_h)
    _render_debug(state, cells, left_w, right_top_h, right_w)

    return ViewTree(cells)