"""Message handlers for coordinator, specialist and critic agents, and their dispatch."""

from __future__ import annotations

from agentcore.multiagent.agent_model import (
    AgentId,
    AgentInstance,
    AgentState,
    Broadcast,
    CoordinatorState,
    CriticState,
    Direct,
    Envelope,
    Message,
    MessageKind,
    ProtocolKind,
    Recipient,
    SpecialistState,
)


def _reply(self_id: AgentId, recipient: Recipient, kind: MessageKind, content_id: int) -> Envelope:
    return Envelope(sender=self_id, recipient=recipient, message=Message(kind, content_id))


def coordinator_process(
    state: CoordinatorState, envelope: Envelope, self_id: AgentId
) -> list[Envelope]:
    """Handle one envelope as a coordinator and return the envelopes it sends.

    A task is delegated to every managed agent; responses are counted down and
    a completion goes back once none are pending. Reviews are broadcast under
    the debate protocol and turned into vote requests under voting.
    """
    kind = envelope.message.kind
    content_id = envelope.message.content_id

    if kind is MessageKind.TASK:
        state.pending_responses = len(state.managed_agents)
        state.round += 1
        return [
            _reply(self_id, Direct(agent_id), MessageKind.DELEGATION, content_id)
            for agent_id in state.managed_agents
        ]

    if kind is MessageKind.RESPONSE:
        if state.pending_responses > 0:
            state.pending_responses -= 1
        if state.pending_responses == 0:
            return [_reply(self_id, Direct(envelope.sender), MessageKind.COMPLETION, content_id)]
        return []

    if kind is MessageKind.REVIEW:
        if state.protocol is ProtocolKind.DEBATE:
            return [_reply(self_id, Broadcast(), MessageKind.REVIEW, content_id)]
        if state.protocol is ProtocolKind.VOTING:
            outbox = [
                _reply(self_id, Direct(agent_id), MessageKind.VOTE, content_id)
                for agent_id in state.managed_agents
            ]
            state.pending_responses = len(state.managed_agents)
            return outbox

    return []


def critic_process(state: CriticState, envelope: Envelope, self_id: AgentId) -> list[Envelope]:
    """Handle one envelope as a critic and return the envelopes it sends.

    Tasks, delegations and responses are reviewed; a vote request is answered
    with 1 if the critic has any criteria, else 0.
    """
    kind = envelope.message.kind
    if kind in (MessageKind.DELEGATION, MessageKind.TASK, MessageKind.RESPONSE):
        state.reviews_given += 1
        return [
            _reply(
                self_id,
                Direct(envelope.sender),
                MessageKind.REVIEW,
                envelope.message.content_id,
            )
        ]
    if kind is MessageKind.VOTE:
        vote_value = 1 if state.criteria else 0
        return [_reply(self_id, Direct(envelope.sender), MessageKind.VOTE, vote_value)]
    return []


def specialist_process(
    state: SpecialistState, envelope: Envelope, self_id: AgentId
) -> list[Envelope]:
    """Handle one envelope as a specialist and return the envelopes it sends.

    A task or delegation is recorded and answered with a response whose content
    id is offset by the specialty; a vote request is answered with 1 for an even
    specialty, else 0.
    """
    kind = envelope.message.kind
    if kind in (MessageKind.DELEGATION, MessageKind.TASK):
        state.steps_taken += 1
        state.context.append(envelope.message.content_id)
        return [
            _reply(
                self_id,
                Direct(envelope.sender),
                MessageKind.RESPONSE,
                envelope.message.content_id + state.specialty,
            )
        ]
    if kind is MessageKind.VOTE:
        vote_value = 1 if state.specialty % 2 == 0 else 0
        return [_reply(self_id, Direct(envelope.sender), MessageKind.VOTE, vote_value)]
    return []


def is_agent_active(agent: AgentInstance) -> bool:
    """Is the agent neither finished nor failed?"""
    return agent.state not in (AgentState.FINISHED, AgentState.FAILED)


def agent_process(agent: AgentInstance) -> None:
    """Drain the agent's inbox through its handler, appending replies to its outbox."""
    if not is_agent_active(agent) or not agent.inbox:
        return
    agent.state = AgentState.BUSY
    envelopes, agent.inbox = agent.inbox, []
    for env in envelopes:
        match agent.kind:
            case CoordinatorState():
                out = coordinator_process(agent.kind, env, agent.id)
            case SpecialistState():
                out = specialist_process(agent.kind, env, agent.id)
            case CriticState():
                out = critic_process(agent.kind, env, agent.id)
            case _:
                raise TypeError(f"unknown agent kind: {agent.kind!r}")
        agent.outbox.extend(out)
    agent.state = AgentState.READY