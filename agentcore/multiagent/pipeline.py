"""A multi-stage processing pipeline whose stage types must line up."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Optional

from agentcore.multiagent.agent_model import AgentId


@dataclass(frozen=True)
class PipelineStage:
    """One stage: the agent that runs it and its input and output type tags."""

    agent_id: AgentId
    input_type: int
    output_type: int


@dataclass
class Pipeline:
    """An ordered list of stages."""

    stages: list[PipelineStage] = field(default_factory=list)

    def add_stage(self, agent_id: AgentId, input_type: int, output_type: int) -> None:
        """Append a stage to the end of the pipeline."""
        self.stages.append(PipelineStage(agent_id, input_type, output_type))

    def is_valid(self) -> bool:
        """Does every stage's output type match the next stage's input type?"""
        return all(prev.output_type == cur.input_type for prev, cur in pairwise(self.stages))

    def agent_at(self, stage_index: int) -> Optional[AgentId]:
        """Return the agent running the given stage, or None if there is no such stage."""
        if 0 <= stage_index < len(self.stages):
            return self.stages[stage_index].agent_id
        return None

    def __len__(self) -> int:
        return len(self.stages)