"""LLM client core: messages, token estimates, conversations, requests, responses, streaming."""