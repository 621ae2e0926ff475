"""Deterministic choice of the agent's next action."""

from __future__ import annotations

from dataclasses import dataclass, field

from agentcore.reasoning.chain import AskClarification, CallTool, Decision, GiveUp, Respond

TOOL_USE_SIGNAL = 1
"""Value of ``last_response_kind`` that signals the model wants a tool."""


@dataclass
class DecisionContext:
    """Everything the decision function looks at."""

    available_tools: list[int] = field(default_factory=list)
    conversation_len: int = 0
    last_response_kind: int = 0
    pending_tool_results: int = 0
    step_count: int = 0
    max_steps: int = 0


def decide_next_action(ctx: DecisionContext) -> Decision:
    """Pick the next decision; rules are checked in order.

    Give up at the step limit; ask for clarification while tool results are
    pending or the conversation is empty; call the first available tool when
    the last response signals tool use; otherwise respond.
    """
    if ctx.step_count >= ctx.max_steps:
        return GiveUp()
    if ctx.pending_tool_results > 0:
        return AskClarification()
    if ctx.conversation_len == 0:
        return AskClarification()
    if ctx.available_tools and ctx.last_response_kind == TOOL_USE_SIGNAL:
        return CallTool(tool_name_idx=ctx.available_tools[0], args_hash=0)
    return Respond()