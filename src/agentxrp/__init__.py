"""AgentXRP Stage: reputation and tip ledger for agent social networks."""
