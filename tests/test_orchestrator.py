from agentcore.multiagent.agent_model import (
    AgentInstance,
    AgentState,
    CoordinatorState,
    CriticState,
    Direct,
    Envelope,
    Message,
    MessageKind,
    ProtocolKind,
    SpecialistState,
)
from agentcore.multiagent.orchestrator import Orchestrator, OrchestratorConfig
from agentcore.multiagent.scheduler import Scheduler, SchedulerKind


def make_specialist(agent_id, specialty):
    return AgentInstance(id=agent_id, kind=SpecialistState(specialty=specialty))


def make_coordinator(agent_id, managed):
    return AgentInstance(
        id=agent_id,
        kind=CoordinatorState(protocol=ProtocolKind.REQUEST_RESPONSE, managed_agents=managed),
    )


def make_critic(agent_id, criteria):
    return AgentInstance(id=agent_id, kind=CriticState(criteria=criteria))


def make_state(agents, budget):
    return Orchestrator(
        agents=agents,
        scheduler=Scheduler([a.id for a in agents]),
        config=OrchestratorConfig(turn_budget=budget, scheduler_kind=SchedulerKind.ROUND_ROBIN),
    )


def task_to(agent_id, content_id):
    return Envelope(0, Direct(agent_id), Message(MessageKind.TASK, content_id))


def test_orchestrator_budget():
    state = make_state([make_specialist(1, 0), make_specialist(2, 1)], 10)
    state.bus.send(task_to(1, 42))
    state.run()
    assert state.turn_count <= state.config.turn_budget


def test_orchestrator_delegation():
    state = make_state(
        [make_coordinator(1, [2, 3]), make_specialist(2, 10), make_specialist(3, 20)], 20
    )
    state.bus.send(task_to(1, 100))
    state.run()
    assert state.turn_count <= 20
    assert state.bus.delivered


def test_orchestrator_with_critic():
    state = make_state(
        [make_coordinator(1, [2, 3]), make_specialist(2, 10), make_critic(3, [1, 2, 3])], 30
    )
    state.bus.send(task_to(1, 200))
    state.run()
    assert state.turn_count <= 30


def test_no_active_agents_stops():
    agents = [make_specialist(1, 0)]
    agents[0].state = AgentState.FINISHED
    state = make_state(agents, 100)
    state.run()
    assert state.turn_count == 0


def test_has_active_agents():
    state = make_state([make_specialist(1, 0), make_specialist(2, 1)], 10)
    assert state.has_active_agents()


def test_step_routes_reply_back_onto_bus():
    state = make_state([make_specialist(1, 0)], 10)
    state.bus.send(task_to(1, 42))
    state.step()
    assert state.turn_count == 1
    assert state.bus.delivered_count() == 1
    assert len(state.bus.queue) == 1
    reply = state.bus.queue[0]
    assert reply.sender == 1
    assert reply.recipient == Direct(0)
    assert reply.message == Message(MessageKind.RESPONSE, 42)
    assert state.agents[0].inbox == []
    assert state.agents[0].outbox == []


def test_step_inactive_agent_uses_turn():
    agents = [make_specialist(1, 0)]
    agents[0].state = AgentState.FAILED
    state = make_state(agents, 10)
    state.bus.send(task_to(1, 42))
    state.step()
    assert state.turn_count == 1
    assert state.bus.pending_count() == 1


def test_step_without_agents_does_nothing():
    state = make_state([], 10)
    state.step()
    assert state.turn_count == 0


def test_finished_agent_count():
    agents = [make_specialist(1, 0), make_specialist(2, 1), make_critic(3, [])]
    agents[0].state = AgentState.FINISHED
    agents[2].state = AgentState.FINISHED
    state = make_state(agents, 10)
    assert state.finished_agent_count() == 2
    assert state.has_active_agents()


def test_run_spends_budget_while_agents_active():
    state = make_state([make_specialist(1, 0), make_specialist(2, 1)], 7)
    state.run()
    assert state.turn_count == 7
    assert state.scheduler.turns_for_agent(1) + state.scheduler.turns_for_agent(2) == 7