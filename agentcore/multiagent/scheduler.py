"""Choosing which agent runs next, round-robin or fewest-turns-first."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Optional

from agentcore.multiagent.agent_model import AgentId


class SchedulerKind(enum.Enum):
    """The scheduling policy."""

    ROUND_ROBIN = "round_robin"
    PRIORITY = "priority"


class Scheduler:
    """Hands out turns to agents and counts how many each has had."""

    def __init__(
        self,
        agent_ids: Iterable[AgentId],
        kind: SchedulerKind = SchedulerKind.ROUND_ROBIN,
    ) -> None:
        self.kind = kind
        self.agent_ids: list[AgentId] = list(agent_ids)
        self.current_index = 0
        self.turns_given: list[int] = [0] * len(self.agent_ids)

    def __repr__(self) -> str:
        return (
            f"Scheduler(kind={self.kind!r}, agent_ids={self.agent_ids!r}, "
            f"current_index={self.current_index!r}, turns_given={self.turns_given!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scheduler):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.agent_ids == other.agent_ids
            and self.current_index == other.current_index
            and self.turns_given == other.turns_given
        )

    def next_agent(self) -> Optional[AgentId]:
        """Return the next agent to run and record its turn; None if there are no agents.

        Round-robin cycles through the list. Priority picks the agent with the
        fewest turns, the earliest in the list on a tie.
        """
        if not self.agent_ids:
            return None
        if self.kind is SchedulerKind.ROUND_ROBIN:
            index = self.current_index
            self.current_index = (index + 1) % len(self.agent_ids)
        else:
            index = min(range(len(self.agent_ids)), key=self.turns_given.__getitem__)
        self.turns_given[index] += 1
        return self.agent_ids[index]

    def turns_for_agent(self, agent_id: AgentId) -> int:
        """Return the turns given to an agent, or 0 if it is unknown."""
        for known, turns in zip(self.agent_ids, self.turns_given):
            if known == agent_id:
                return turns
        return 0