"""Service layer implementing the ledger operations."""
