"""A factory handing out the built-in agents in turn."""

from __future__ import annotations

from .agents import Follower, Hunter, Orbiter, Simon, Sniper, Wanderer
from .robot import Agent


class AgentFactory:
    """Creates agents, cycling through the built-in kinds."""

    def __init__(self) -> None:
        self._count = 0

    def create_agent(self) -> Agent:
        """A new agent of the next kind in the cycle."""
        kind = self._count % 6
        self._count += 1
        if kind == 0:
            return Hunter(100, 20, 30)
        if kind == 1:
            return Follower(100, 20, 30)
        if kind == 2:
            return Sniper()
        if kind == 3:
            return Simon(100, 20, 30)
        if kind == 4:
            return Wanderer(100, 20, 30)
        return Orbiter(20, 30)