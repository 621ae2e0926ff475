"""The orchestrator loop tying agents, message bus, router and scheduler together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from agentcore.multiagent.agent_model import AgentId, AgentInstance, AgentState, Direct, Envelope
from agentcore.multiagent.agents import agent_process, is_agent_active
from agentcore.multiagent.message_bus import MessageBus
from agentcore.multiagent.router import Router
from agentcore.multiagent.scheduler import Scheduler, SchedulerKind


@dataclass(frozen=True)
class OrchestratorConfig:
    """Limits for an orchestrator run."""

    turn_budget: int
    scheduler_kind: SchedulerKind = SchedulerKind.ROUND_ROBIN


@dataclass
class Orchestrator:
    """The full orchestrator state."""

    agents: list[AgentInstance]
    scheduler: Scheduler
    config: OrchestratorConfig
    bus: MessageBus = field(default_factory=MessageBus)
    router: Router = field(default_factory=Router)
    turn_count: int = 0

    def _find_agent(self, agent_id: AgentId) -> Optional[AgentInstance]:
        return next((agent for agent in self.agents if agent.id == agent_id), None)

    def step(self) -> None:
        """Run one turn.

        The scheduler picks an agent; its messages are delivered from the bus,
        it processes them, and its outbox is routed back onto the bus as direct
        envelopes. Inactive agents use up their turn without doing anything.
        """
        agent_id = self.scheduler.next_agent()
        if agent_id is None:
            return
        agent = self._find_agent(agent_id)
        if agent is None:
            return

        if not is_agent_active(agent):
            self.turn_count += 1
            return

        agent.inbox.extend(self.bus.deliver(agent_id))
        agent_process(agent)

        outbox, agent.outbox = agent.outbox, []
        ids = [a.id for a in self.agents]
        for env in outbox:
            for target_id in self.router.resolve(env.recipient, ids):
                self.bus.send(Envelope(env.sender, Direct(target_id), env.message))

        self.turn_count += 1

    def run(self) -> None:
        """Step until the turn budget is spent, or no agent is active and the bus is empty."""
        while self.turn_count < self.config.turn_budget:
            if not self.has_active_agents() and self.bus.is_empty():
                break
            self.step()

    def has_active_agents(self) -> bool:
        """Is any agent still ready or busy?"""
        return any(is_agent_active(agent) for agent in self.agents)

    def finished_agent_count(self) -> int:
        """Number of agents in the finished state."""
        return sum(1 for agent in self.agents if agent.state is AgentState.FINISHED)