import io

import pytest

from robotarena.robot import Action, Agent
from robotarena.simulation import Simulation
from robotarena.vector import Vector
from robotarena.views import ConsoleView, View


class Idle(Agent):
    def update(self, robot):
        return Action()


def test_view_is_abstract():
    with pytest.raises(TypeError):
        View()


def test_output_without_simulation_raises():
    view = ConsoleView(io.StringIO())
    with pytest.raises(RuntimeError):
        view.output()


def test_log_without_simulation_raises():
    view = ConsoleView(io.StringIO())
    with pytest.raises(RuntimeError):
        view.log("hello")


def test_log_prefixes_runtime():
    out = io.StringIO()
    view = ConsoleView(out)
    sim = Simulation()
    view.set_simulation(sim)
    view.log("hello")
    assert out.getvalue() == f"{sim.runtime_string()}: hello\n"
    assert out.getvalue() == "0:00.000: hello\n"


def test_output_lists_players():
    out = io.StringIO()
    view = ConsoleView(out)
    sim = Simulation()
    sim.new_player("bob", Idle(), Vector(10, 20), 0.0)
    view.set_simulation(sim)
    view.output()
    lines = out.getvalue().splitlines()
    assert lines[0] == sim.runtime_string()
    assert lines[1] == "\tbob at (10, 20), 100 health"
    assert len(lines) == 2


def test_finish_prompts_and_waits_for_enter():
    out = io.StringIO()
    inp = io.StringIO("\nrest")
    view = ConsoleView(out, inp)
    view.finish()
    assert out.getvalue() == "Press enter to quit."
    assert inp.read() == "rest"


def test_console_view_always_runs():
    assert ConsoleView(io.StringIO()).is_running() is True