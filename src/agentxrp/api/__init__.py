"""HTTP API for AgentXRP Stage."""
