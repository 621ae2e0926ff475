"""Single-agent reasoning: guardrails, retries, chains, decisions, tools and the agent state machine."""