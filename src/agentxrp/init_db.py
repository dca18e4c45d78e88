"""Create all tables on the configured database for local development."""

from agentxrp.db.session import create_tables

if __name__ == "__main__":
    create_tables()
    print("Database initialized.")
