import dataclasses

import pytest

from agentcore.app.integration_types import (
    KeyPress,
    LlmResponseReceived,
    PaneId,
    Quit,
    Tick,
    pane_from_id,
)


@pytest.mark.parametrize(
    "value, pane",
    [
        (0, PaneId.CHAT_INPUT),
        (1, PaneId.CONVERSATION_VIEW),
        (2, PaneId.AGENT_STATUS_PANEL),
        (3, PaneId.DEBUG_REASONING_PANEL),
    ],
)
def test_pane_from_id_known(value, pane):
    assert pane_from_id(value) is pane


@pytest.mark.parametrize("value", [4, 99, -1, 0xFFFFFFFF])
def test_pane_from_id_out_of_range(value):
    assert pane_from_id(value) is None


@pytest.mark.parametrize("pane", list(PaneId))
def test_pane_round_trip(pane):
    assert pane_from_id(pane.value) is pane


def test_events_compare_by_value():
    assert KeyPress(5) == KeyPress(5)
    assert not KeyPress(5) == KeyPress(6)
    assert Tick() == Tick()
    assert not Tick() == Quit()


def test_events_are_immutable():
    event = LlmResponseReceived(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.content_id = 3
    assert event.content_id == 2
    assert event == LlmResponseReceived(1, 2)


def test_events_are_hashable():
    assert len({KeyPress(1), KeyPress(1), Tick()}) == 2