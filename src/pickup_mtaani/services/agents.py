"""Agent discovery."""

from __future__ import annotations

from ..schemas.agents import Agent, AgentQuery
from .base import BaseService


class AgentsService(BaseService):
    def list(self, params: AgentQuery | None = None) -> list[Agent]:
        """Agents, optionally filtered by location id or a business-name search key."""
        return self._items(self._http.get("/agents", params), Agent)
