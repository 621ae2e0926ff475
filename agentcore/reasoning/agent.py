"""Agent orchestration: configuration, snapshots, single steps and bounded runs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Optional

from agentcore.reasoning.agent_state import (
    AgentAction,
    AgentEvent,
    AgentPhase,
    agent_transition,
    is_terminal,
)
from agentcore.reasoning.chain import Step
from agentcore.reasoning.guardrails import GuardrailConfig
from agentcore.reasoning.retry import RetryState


@dataclass(frozen=True)
class AgentConfig:
    """Static configuration for an agent run."""

    max_steps: int
    guardrails: GuardrailConfig
    retry_config: RetryState


@dataclass(frozen=True)
class AgentSnapshot:
    """The agent's complete state at one point in time."""

    phase: AgentPhase
    retry_state: RetryState
    reasoning_chain: list[Step] = field(default_factory=list)
    step_count: int = 0
    last_action: AgentAction = AgentAction.NOOP


def agent_step(
    config: AgentConfig, snapshot: AgentSnapshot, event: AgentEvent
) -> Optional[AgentSnapshot]:
    """Apply one event, returning the new snapshot.

    Returns None when the step limit is reached or the transition is invalid.
    """
    if snapshot.step_count >= config.max_steps:
        return None
    result = agent_transition(snapshot.phase, event)
    if result is None:
        return None
    next_phase, action = result
    return replace(
        snapshot,
        phase=next_phase,
        reasoning_chain=list(snapshot.reasoning_chain),
        step_count=snapshot.step_count + 1,
        last_action=action,
    )


def agent_run(
    config: AgentConfig, initial: AgentSnapshot, events: Iterable[AgentEvent]
) -> AgentSnapshot:
    """Apply events in order until a terminal phase, the step limit or a failed step."""
    snapshot = initial
    for event in events:
        if is_terminal(snapshot.phase) or snapshot.step_count >= config.max_steps:
            break
        following = agent_step(config, snapshot, event)
        if following is None:
            break
        snapshot = following
    return snapshot