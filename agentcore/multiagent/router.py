"""Resolution of recipients to concrete agent ids via topic subscriptions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from agentcore.multiagent.agent_model import AgentId, Broadcast, Direct, Recipient, Topic


@dataclass(frozen=True)
class TopicSubscription:
    """A link from a topic to a subscribing agent."""

    topic_id: int
    agent_id: AgentId


@dataclass
class Router:
    """Maps topics to their subscribing agents."""

    subscriptions: list[TopicSubscription] = field(default_factory=list)

    def subscribe(self, topic_id: int, agent_id: AgentId) -> None:
        """Subscribe an agent to a topic."""
        self.subscriptions.append(TopicSubscription(topic_id, agent_id))

    def resolve(self, recipient: Recipient, all_agent_ids: Iterable[AgentId]) -> list[AgentId]:
        """Return the agent ids a recipient stands for.

        Direct gives its one id, Broadcast every known id, and Topic the
        subscribers of that topic in subscription order.
        """
        match recipient:
            case Direct(agent_id=agent_id):
                return [agent_id]
            case Broadcast():
                return list(all_agent_ids)
            case Topic(topic_id=topic_id):
                return [sub.agent_id for sub in self.subscriptions if sub.topic_id == topic_id]
        raise TypeError(f"not a recipient: {recipient!r}")