"""A single request-response exchange with a tick-based timeout."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from agentcore.multiagent.agent_model import AgentId


class RRState(enum.Enum):
    """The phase of a request-response exchange."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"


@dataclass
class RequestResponse:
    """A request from one agent to another that times out after ``timeout`` ticks."""

    requester: AgentId
    responder: AgentId
    request_id: int
    timeout: int
    state: RRState = field(default=RRState.IDLE, init=False)
    ticks_waiting: int = field(default=0, init=False)

    def send(self) -> None:
        """Mark the request as sent; only has an effect while idle."""
        if self.state is RRState.IDLE:
            self.state = RRState.AWAITING_RESPONSE

    def receive(self) -> None:
        """Mark the response as received; only has an effect while awaiting it."""
        if self.state is RRState.AWAITING_RESPONSE:
            self.state = RRState.COMPLETED

    def tick(self) -> None:
        """Count one tick of waiting, timing out once the budget is used up."""
        if self.state is RRState.AWAITING_RESPONSE:
            self.ticks_waiting += 1
            if self.ticks_waiting >= self.timeout:
                self.state = RRState.TIMED_OUT

    def is_done(self) -> bool:
        """Has the exchange completed or timed out?"""
        return self.state in (RRState.COMPLETED, RRState.TIMED_OUT)