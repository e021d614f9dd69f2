"""A game: players with lives, a simulation and a view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .robot import Agent
from .signals import Slot
from .simulation import Simulation
from .views import View

VERSION = "0.1.0"


class AgentSource(Protocol):
    def create_agent(self) -> Agent: ...


@dataclass
class Player:
    """A participant: where its agents come from and the lives it has left."""

    agent_factory: AgentSource | None
    lives: int


class Game:
    """Runs a simulation with a view, respawning players while they have lives."""

    def __init__(self, simulation: Simulation, view: View, starting_lives: int = 3) -> None:
        self.simulation = simulation
        self.view = view
        self.starting_lives = starting_lives
        self.running = True
        self.players: dict[str, Player] = {}

        self._on_death = Slot(self.on_death)
        self._on_simulation_step = Slot(self.on_simulation_step)

        view.set_simulation(simulation)
        simulation.death_signal.connect(self._on_death)
        simulation.simulation_step_signal.connect(self._on_simulation_step)

        view.log(f"Welcome to robotarena v{VERSION}")

    def add_player(self, name: str, agent_factory: AgentSource) -> None:
        """Add a player and spawn its first robot."""
        self.players.setdefault(name, Player(agent_factory, self.starting_lives))
        self.simulation.new_player(name, agent_factory.create_agent())

    def run(self) -> None:
        """Run until the game, the simulation or the view stops."""
        while self.simulation.is_running() and self.view.is_running() and self.running:
            self.view.input()
            self.simulation.update()
            self.view.output()
        self._on_death.disconnect()
        self._on_simulation_step.disconnect()
        self.view.finish()

    def on_death(self, name: str) -> None:
        """Take a life from a player and respawn it if any are left."""
        player = self.players.setdefault(name, Player(None, 0))
        player.lives -= 1
        if player.lives > 0 and player.agent_factory is not None:
            self.view.log(f"{name} died! {player.lives} lives left")
            self.simulation.new_player(name, player.agent_factory.create_agent())
        else:
            self.view.log(
                f"{name} lost! {self.simulation.num_players()} players left"
            )

    def on_simulation_step(self) -> None:
        """End the game when at most one robot is left."""
        players = self.simulation.players
        if len(players) <= 1:
            if players:
                winner = next(iter(players))
                self.view.log(f"{winner} wins the game!")
            self.view.log("Game Over!")
            self.running = False