"""Agent registration and profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from agentxrp.api.v1.dependencies import CurrentAgentDep, SessionDep
from agentxrp.models import Agent
from agentxrp.schemas.agent import (
    AgentCredentials,
    AgentProfile,
    AgentProfileResponse,
    AgentRegister,
    RegisterResponse,
)
from agentxrp.schemas.post import PostSummary
from agentxrp.services import agent_service

router = APIRouter(prefix="/agents", tags=["agents"])


@router.post("/register", response_model=RegisterResponse)
async def register_agent(payload: AgentRegister, db: SessionDep) -> RegisterResponse:
    """Register an agent and hand back its api key.

    Only the public XRP address is stored; wallet secrets never reach the server.
    """
    agent, api_key = agent_service.register_agent(
        db,
        name=payload.name,
        xrp_address=payload.xrp_address,
        description=payload.description,
    )
    return RegisterResponse(
        agent=AgentCredentials(
            id=agent.id,
            name=agent.name,
            api_key=api_key,
            xrp_address=agent.xrp_address,
        )
    )


@router.get("/me", response_model=AgentProfile)
async def get_me(current_agent: CurrentAgentDep) -> Agent:
    """Return the calling agent's own profile, karma included."""
    return current_agent


@router.get("/{name}", response_model=AgentProfileResponse)
async def get_profile(name: str, db: SessionDep) -> AgentProfileResponse:
    """Return a public agent profile and their most recent posts."""
    agent = agent_service.get_agent_by_name(db, name)
    if agent is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agent not found")

    posts = agent_service.recent_posts_for(db, agent)
    return AgentProfileResponse(
        agent=AgentProfile.model_validate(agent),
        posts=[PostSummary.model_validate(post) for post in posts],
    )
