"""Safety limits that every agent step must respect."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GuardrailConfig:
    """Configured safety limits."""

    max_message_len: int
    max_recursion_depth: int
    max_reasoning_steps: int

    def check_message_length(self, message_len: int) -> bool:
        """Is the message length within the limit (inclusive)?"""
        return message_len <= self.max_message_len

    def check_recursion_depth(self, depth: int) -> bool:
        """Is the recursion depth within the limit (inclusive)?"""
        return depth <= self.max_recursion_depth

    def check_reasoning_steps(self, step_count: int) -> bool:
        """Is the step count strictly below the limit?"""
        return step_count < self.max_reasoning_steps

    def all_guards_pass(self, message_len: int, recursion_depth: int, step_count: int) -> bool:
        """Do all three checks pass?"""
        return (
            self.check_message_length(message_len)
            and self.check_recursion_depth(recursion_depth)
            and self.check_reasoning_steps(step_count)
        )