"""Tool specifications, lookup and argument validation."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional


class ParamKind(enum.Enum):
    """The kind of a tool parameter."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"


@dataclass(frozen=True)
class ToolParam:
    """One declared parameter of a tool."""

    name_id: int
    kind: ParamKind
    required: bool


@dataclass
class ToolSpec:
    """The specification of a tool the agent may call."""

    name_id: int
    description_id: int
    params: list[ToolParam] = field(default_factory=list)


@dataclass
class ToolCallArgs:
    """Arguments supplied in a call, as ``(param_name_id, kind)`` pairs."""

    param_values: list[tuple[int, ParamKind]] = field(default_factory=list)


def find_tool(registry: Sequence[ToolSpec], name_id: int) -> Optional[int]:
    """Return the index of the first tool with ``name_id``, or None."""
    return next(
        (index for index, spec in enumerate(registry) if spec.name_id == name_id),
        None,
    )


def validate_tool_call(spec: ToolSpec, args: ToolCallArgs) -> bool:
    """Check a call against its spec.

    Every required parameter must be supplied with the right kind, and every
    supplied argument must name a declared parameter of that kind.
    """
    supplied = set(args.param_values)
    declared = {(param.name_id, param.kind) for param in spec.params}
    required_ok = all(
        (param.name_id, param.kind) in supplied for param in spec.params if param.required
    )
    return required_ok and supplied <= declared