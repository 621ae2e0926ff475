"""Pure building blocks for LLM agents and multi-agent orchestration."""

__version__ = "0.1.0"