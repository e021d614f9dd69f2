"""Views that present a running simulation to the user."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .simulation import Simulation


class View(ABC):
    """Displays a simulation and handles user interaction."""

    @abstractmethod
    def set_simulation(self, simulation: Simulation | None) -> None:
        """Choose the simulation to display."""

    @abstractmethod
    def input(self) -> None:
        """Handle all input from the user."""

    @abstractmethod
    def output(self) -> None:
        """Handle all output."""

    @abstractmethod
    def finish(self) -> None:
        """Finish the user interaction."""

    @abstractmethod
    def is_running(self) -> bool:
        """Whether the view is active."""

    @abstractmethod
    def log(self, text: str) -> None:
        """Add a line of text to the log."""


class ConsoleView(View):
    """Prints the state and progress of the simulation to a text stream."""

    def __init__(self, stream: TextIO | None = None, input_stream: TextIO | None = None) -> None:
        self._stream = stream
        self._input_stream = input_stream
        self._simulation: Simulation | None = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def input_stream(self) -> TextIO:
        return self._input_stream if self._input_stream is not None else sys.stdin

    def _require_simulation(self) -> Simulation:
        if self._simulation is None:
            raise RuntimeError("No Simulation was set for this View.")
        return self._simulation

    def set_simulation(self, simulation: Simulation | None) -> None:
        self._simulation = simulation

    def input(self) -> None:
        pass

    def output(self) -> None:
        simulation = self._require_simulation()
        out = self.stream
        print(simulation.runtime_string(), file=out)
        for name, robot in simulation.players.items():
            print(f"\t{name} at {robot.position}, {robot.health:g} health", file=out)

    def finish(self) -> None:
        out = self.stream
        out.write("Press enter to quit.")
        out.flush()
        self.input_stream.read(1)

    def is_running(self) -> bool:
        return True

    def log(self, text: str) -> None:
        simulation = self._require_simulation()
        print(f"{simulation.runtime_string()}: {text}", file=self.stream)