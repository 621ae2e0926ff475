"""A debate that accepts a bounded number of arguments."""

from __future__ import annotations

from agentcore.multiagent.agent_model import AgentId


class Debate:
    """A debate on a topic that ends after ``max_rounds`` arguments."""

    def __init__(self, topic_id: int, max_rounds: int) -> None:
        self.topic_id = topic_id
        self.max_rounds = max_rounds
        self.rounds_remaining = max_rounds
        self.arguments: list[tuple[AgentId, int]] = []

    def __repr__(self) -> str:
        return (
            f"Debate(topic_id={self.topic_id!r}, rounds_remaining={self.rounds_remaining!r}, "
            f"max_rounds={self.max_rounds!r}, arguments={self.arguments!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Debate):
            return NotImplemented
        return (
            self.topic_id == other.topic_id
            and self.rounds_remaining == other.rounds_remaining
            and self.max_rounds == other.max_rounds
            and self.arguments == other.arguments
        )

    def step(self, agent_id: AgentId, argument_id: int) -> None:
        """Record an argument and use up a round; ignored once the debate is over."""
        if self.rounds_remaining == 0:
            return
        self.arguments.append((agent_id, argument_id))
        self.rounds_remaining -= 1

    def is_finished(self) -> bool:
        """Are there no rounds left?"""
        return self.rounds_remaining == 0

    def argument_count(self) -> int:
        """Number of arguments recorded so far."""
        return len(self.arguments)