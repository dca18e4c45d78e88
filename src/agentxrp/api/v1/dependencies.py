"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from agentxrp.db.session import get_db
from agentxrp.models import Agent
from agentxrp.services.agent_service import authenticate

# Missing credentials are reported as 401 by get_current_agent, not 403 by the scheme.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_agent(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> Agent:
    """Resolve the bearer api key to the calling agent.

    Args:
        credentials: HTTP Bearer credentials, if any were sent
        db: Database session

    Returns:
        Agent owning the api key

    Raises:
        HTTPException: If the key is missing or unknown
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    agent = authenticate(db, credentials.credentials)
    if agent is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return agent


CurrentAgentDep = Annotated[Agent, Depends(get_current_agent)]
