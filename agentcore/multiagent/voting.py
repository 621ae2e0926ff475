"""A voting round decided by a percentage majority."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from agentcore.multiagent.agent_model import AgentId


@dataclass
class VotingRound:
    """Votes on a proposal; ``required_majority`` is a percentage from 0 to 100."""

    proposal_id: int
    required_majority: int
    expected_voters: int
    votes: list[tuple[AgentId, bool]] = field(default_factory=list, init=False)

    def cast_vote(self, agent_id: AgentId, vote: bool) -> None:
        """Record a vote; a second vote by the same agent is ignored."""
        if any(voter == agent_id for voter, _ in self.votes):
            return
        self.votes.append((agent_id, vote))

    def tally(self) -> Optional[bool]:
        """Return None while votes are outstanding, else whether the majority is met."""
        total = len(self.votes)
        if total < self.expected_voters:
            return None
        if total == 0:
            return False
        return 100 * self.yes_count() >= self.required_majority * total

    def yes_count(self) -> int:
        """Number of yes votes cast."""
        return sum(1 for _, vote in self.votes if vote)

    def no_count(self) -> int:
        """Number of no votes cast."""
        return sum(1 for _, vote in self.votes if not vote)

    def is_complete(self) -> bool:
        """Have all expected voters voted?"""
        return len(self.votes) >= self.expected_voters