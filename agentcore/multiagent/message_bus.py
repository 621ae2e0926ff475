"""A message queue with an audit trail of delivered envelopes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from agentcore.multiagent.agent_model import AgentId, Broadcast, Direct, Envelope


def _targets(env: Envelope, agent_id: AgentId) -> bool:
    # Topic envelopes are expanded by the router before they reach the bus.
    match env.recipient:
        case Direct(agent_id=target):
            return target == agent_id
        case Broadcast():
            return True
    return False


@dataclass
class MessageBus:
    """Pending envelopes, delivered envelopes and the next sequence number."""

    queue: list[Envelope] = field(default_factory=list)
    delivered: list[Envelope] = field(default_factory=list)
    next_seq: int = 0

    def send(self, env: Envelope) -> None:
        """Enqueue an envelope, stamping it with the next sequence number."""
        self.queue.append(replace(env, sequence_num=self.next_seq))
        self.next_seq += 1

    def deliver(self, agent_id: AgentId) -> list[Envelope]:
        """Move every envelope addressed to ``agent_id`` to delivered and return them."""
        matched = [env for env in self.queue if _targets(env, agent_id)]
        self.queue = [env for env in self.queue if not _targets(env, agent_id)]
        self.delivered.extend(matched)
        return matched

    def deliver_next(self) -> Optional[Envelope]:
        """Deliver the oldest queued envelope, or return None if the queue is empty."""
        if not self.queue:
            return None
        env = self.queue.pop(0)
        self.delivered.append(env)
        return env

    def is_empty(self) -> bool:
        """Is the queue empty?"""
        return not self.queue

    def delivered_count(self) -> int:
        """Number of envelopes delivered so far."""
        return len(self.delivered)

    def pending_count(self) -> int:
        """Number of envelopes still queued."""
        return len(self.queue)