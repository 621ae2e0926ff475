"""Reasoning chains: Observe, Think, Decide and Act steps in non-decreasing order."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Union


@dataclass(frozen=True)
class CallTool:
    """Decision to call a tool."""

    tool_name_idx: int
    args_hash: int


@dataclass(frozen=True)
class Respond:
    """Decision to answer the user."""


@dataclass(frozen=True)
class AskClarification:
    """Decision to ask for more information or wait for pending input."""


@dataclass(frozen=True)
class GiveUp:
    """Decision to stop trying."""


Decision = Union[CallTool, Respond, AskClarification, GiveUp]


@dataclass(frozen=True)
class Observe:
    """Ingesting new information; the payload is an opaque id."""

    observation_id: int


@dataclass(frozen=True)
class Think:
    """Internal deliberation; the payload is a thought id."""

    thought_id: int


@dataclass(frozen=True)
class Decide:
    """A concrete decision."""

    decision: Decision


@dataclass(frozen=True)
class Act:
    """Execution of an action; the payload is an action id."""

    action_id: int


Step = Union[Observe, Think, Decide, Act]

_ORDER = {Observe: 0, Think: 1, Decide: 2, Act: 3}


def chain_step_order(step: Step) -> int:
    """Return the phase-order tag: Observe 0, Think 1, Decide 2, Act 3."""
    try:
        return _ORDER[type(step)]
    except KeyError:
        raise TypeError(f"not a reasoning step: {step!r}") from None


def is_chain_well_formed(chain: list[Step]) -> bool:
    """Is the chain's sequence of order tags non-decreasing?"""
    return all(
        chain_step_order(prev) <= chain_step_order(cur) for prev, cur in pairwise(chain)
    )


def append_step(chain: list[Step], step: Step) -> bool:
    """Append ``step`` if the chain stays well-formed; return whether it was added."""
    if chain and chain_step_order(step) < chain_step_order(chain[-1]):
        return False
    chain.append(step)
    return True