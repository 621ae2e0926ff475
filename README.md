# agentcore

agentcore is a set of small, pure, deterministic building blocks for agents
driven by an LLM. Every function works on plain values and does no I/O. It
has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `agentcore.llm`: LLM client core

- `messages`: the message types `Role`, `RoleMessage`, `ToolCall`
  (wrapping a `ToolCallInfo`) and `ToolResult` (wrapping a `ToolResultInfo`).
  `message_role` returns the logical role of a message. A tool call counts as
  the assistant and a tool result counts as the user. `message_content`
  returns the bytes used for token estimates.
- `tokens`: `estimate_tokens_single(msg)` computes
  `len(content) // 4 + 4`. `estimate_tokens(messages)` sums that over a list.
- `conversation`: `Conversation(system_msg, max_context_tokens)` always
  starts with a system message.
  - `append` enforces alternation: system, then user, then assistant, then
    user, and so on. It raises `InvalidAlternationError`, or
    `NotSystemFirstError` if the conversation is empty. Both are subclasses
    of `ConversationError`.
  - `trim_to_context` removes the oldest non-system messages until the
    estimate fits.
  - `total_estimated_tokens` returns the current estimate.
- `request`: `build_request(model, messages, temperature, max_tokens, tools)`
  returns a `Request`. Temperature is fixed-point, so 100 means 1.0, and at
  most 200 is allowed. Invalid input raises one of these `RequestError`
  subclasses:
  - `EmptyMessagesError`
  - `NoSystemMessageError`
  - `TemperatureTooHighError`
  - `MaxTokensZeroError`
- `response`: `parse_response(data)` decodes a compact big-endian,
  length-prefixed binary layout into a `Response`. The `Response` holds
  `TextContent` / `ToolUseContent` items, a `FinishReason` and a `Usage`.
  Malformed data raises one of these `ResponseParseError` subclasses:
  - `InvalidFormatError`
  - `MissingFieldError`
  - `InvalidFinishReasonError`

  `LlmTransport` is an abstract interface with a `send_request(req)` method.
  Its error classes derive from `TransportError`:
  - `ConnectionFailedError`
  - `TransportTimeoutError`
  - `InvalidResponseError`
- `streaming`: `chunk_response(full, chunk_size)` splits bytes into chunks.
  `StreamAccumulator` collects chunks with `add_chunk` and exposes the
  concatenation as `accumulated`. It also has `is_complete(expected_len)`.

```python
from agentcore.llm.conversation import Conversation
from agentcore.llm.messages import Role, RoleMessage

conv = Conversation(b"You are helpful.", 1000)
conv.append(RoleMessage(Role.USER, b"hello"))
conv.trim_to_context()
print(conv.total_estimated_tokens())
```

## `agentcore.reasoning`: single-agent reasoning

- `guardrails`: `GuardrailConfig` holds the limits on message length,
  recursion depth and reasoning steps. It checks them with:
  - `check_message_length`
  - `check_recursion_depth`
  - `check_reasoning_steps`
  - `all_guards_pass`
- `retry`: `initial_retry_state(max_attempts, base_delay_ms, max_delay_ms)`
  creates a `RetryState`. Its `next_retry()` doubles the delay, capped at the
  maximum, and returns `None` once attempts are exhausted. `should_retry()`
  says whether another retry is allowed.
- `chain`: reasoning steps `Observe`, `Think`, `Decide` and `Act`, and the
  decisions `CallTool`, `Respond`, `AskClarification` and `GiveUp`.
  - `chain_step_order` returns a step's order.
  - `is_chain_well_formed` checks that the order never goes backwards.
  - `append_step` adds a step only if the chain stays well-formed.
- `agent_state`: the seven-phase state machine over `AgentPhase`,
  `AgentEvent` and `AgentAction`. It provides `agent_transition` and
  `is_terminal`.
- `decision`: `decide_next_action(ctx)` picks a decision from a
  `DecisionContext`.
- `tool_registry`: `find_tool(registry, name_id)` looks up a tool.
  `validate_tool_call(spec, args)` checks a call against a `ToolSpec`. The
  related types are `ToolParam`, `ParamKind` and `ToolCallArgs`.
- `agent`: `agent_step` and `agent_run` apply events to an `AgentSnapshot`
  under an `AgentConfig`. They stop at a terminal phase, at the step limit
  or at an invalid transition.

## `agentcore.multiagent`: multi-agent orchestration

- `agent_model`: the data model for agents and messages.
  - Agents: `AgentInstance`, with the states `CoordinatorState`,
    `SpecialistState` and `CriticState`.
  - Messages: `Message` and `Envelope`, with the recipients `Direct`,
    `Broadcast` and `Topic`.
  - Enums: `AgentState`, `MessageKind` and `ProtocolKind`.
- `router`: `Router.subscribe` records a topic subscription.
  `Router.resolve` expands a recipient into agent ids.
- `scheduler`: `Scheduler(agent_ids, kind)` hands out turns, round-robin or
  fewest turns first. Its methods are `next_agent` and `turns_for_agent`.
- `message_bus`: `MessageBus` is a FIFO bus with an audit trail. Its methods
  are:
  - `send`
  - `deliver`
  - `deliver_next`
  - `is_empty`
  - `delivered_count`
  - `pending_count`
- `agents`: the handlers `coordinator_process`, `specialist_process` and
  `critic_process`. `agent_process` dispatches to them and `is_agent_active`
  reports whether an agent can still run.
- `orchestrator`: `Orchestrator` ties agents, bus, router and scheduler
  together. `step()` runs one turn. `run()` runs until the
  `OrchestratorConfig.turn_budget` is spent or no work remains.
- Protocols:
  - `debate`: `Debate`
  - `pipeline`: `Pipeline`, made of `PipelineStage`s
  - `request_response`: `RequestResponse` with `RRState`
  - `voting`: `VotingRound`, with a percentage majority

```python
from agentcore.multiagent.agent_model import (
    AgentInstance, CoordinatorState, Direct, Envelope, Message, MessageKind,
    ProtocolKind, SpecialistState,
)
from agentcore.multiagent.orchestrator import Orchestrator, OrchestratorConfig
from agentcore.multiagent.scheduler import Scheduler

agents = [
    AgentInstance(1, CoordinatorState(ProtocolKind.REQUEST_RESPONSE, [2])),
    AgentInstance(2, SpecialistState(10)),
]
orch = Orchestrator(agents, Scheduler([1, 2]), OrchestratorConfig(turn_budget=20))
orch.bus.send(Envelope(0, Direct(1), Message(MessageKind.TASK, 100)))
orch.run()
print(orch.turn_count, orch.bus.delivered_count())
```

## `agentcore.app`: application core in the Elm style

- `integration_types`: the application events and the panes.
  - Events: `KeyPress`, `Resize`, `UserSubmitMessage`, `SwitchPane`,
    `SwitchAgent`, `AgentEvent`, `OrchestratorTick`, `LlmResponseReceived`,
    `ToolResultReceived`, `Tick` and `Quit`.
  - Panes: the `PaneId` enum. `pane_from_id` converts a number to a pane.
- `app_state`: `AppState(agent_count, turn_budget)` and `ConversationEntry`.
- `app_update`: `app_update(state, event)` returns a new state and leaves the
  input untouched.
- `app_view`: `app_view(state, width, height)` returns a `ViewTree` of
  `ViewCell`s laid out in four panes. A screen smaller than 4x4 renders
  nothing.
- `message_bridge`: `user_input_to_message`, `message_to_conversation_entry`,
  `is_valid_pane_id` and `is_valid_agent_id`.
- `adapters`: `adapt_key_event`, `adapt_resize_event`, `adapt_http_response`
  and `adapt_http_error` map raw inputs to events.

```python
from agentcore.app.app_state import AppState
from agentcore.app.app_update import app_update
from agentcore.app.app_view import app_view
from agentcore.app.integration_types import KeyPress, UserSubmitMessage

state = AppState(agent_count=3, turn_budget=10)
state = app_update(state, KeyPress(ord("h")))
state = app_update(state, UserSubmitMessage())
view = app_view(state, 80, 24)
print(len(view.cells))
```

## What it does not do

- There is no command-line program and no terminal screen. `app_view`
  produces cells, and drawing them is up to you.
- There is no event loop and no network client. `LlmTransport` is only an
  interface, and no HTTP implementation is included.
- `adapt_http_response` does not parse the body. It always reports content
  id 0.
- Nothing is stored between runs.