"""Core data model for multi-agent orchestration: agents, messages and envelopes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

AgentId = int


class AgentState(enum.Enum):
    """Lifecycle state of an agent."""

    READY = "ready"
    BUSY = "busy"
    FINISHED = "finished"
    FAILED = "failed"


class MessageKind(enum.Enum):
    """The type tag of a message payload."""

    TASK = "task"
    RESPONSE = "response"
    REVIEW = "review"
    VOTE = "vote"
    DELEGATION = "delegation"
    COMPLETION = "completion"
    ERROR = "error"


@dataclass(frozen=True)
class Message:
    """A payload: a kind tag and a content identifier."""

    kind: MessageKind
    content_id: int


@dataclass(frozen=True)
class Direct:
    """Address a single agent."""

    agent_id: AgentId


@dataclass(frozen=True)
class Broadcast:
    """Address every agent."""


@dataclass(frozen=True)
class Topic:
    """Address the subscribers of a topic."""

    topic_id: int


Recipient = Union[Direct, Broadcast, Topic]


@dataclass(frozen=True)
class Envelope:
    """A message wrapped for routing, with a bus-assigned sequence number."""

    sender: AgentId
    recipient: Recipient
    message: Message
    sequence_num: int = 0


class ProtocolKind(enum.Enum):
    """Protocols a coordinator can follow."""

    REQUEST_RESPONSE = "request_response"
    PIPELINE = "pipeline"
    DEBATE = "debate"
    VOTING = "voting"


@dataclass
class CoordinatorState:
    """State held by a coordinator agent."""

    protocol: ProtocolKind
    managed_agents: list[AgentId] = field(default_factory=list)
    pending_responses: int = 0
    round: int = 0


@dataclass
class SpecialistState:
    """State held by a specialist agent."""

    specialty: int
    context: list[int] = field(default_factory=list)
    steps_taken: int = 0


@dataclass
class CriticState:
    """State held by a critic agent."""

    criteria: list[int] = field(default_factory=list)
    reviews_given: int = 0


AgentKind = Union[CoordinatorState, SpecialistState, CriticState]


@dataclass
class AgentInstance:
    """A running agent with its kind-specific state and mailboxes."""

    id: AgentId
    kind: AgentKind
    state: AgentState = AgentState.READY
    inbox: list[Envelope] = field(default_factory=list)
    outbox: list[Envelope] = field(default_factory=list)