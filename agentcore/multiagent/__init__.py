"""Multi-agent orchestration: agents, routing, scheduling, message bus and protocols."""