# robotarena

A small, deterministic simulation of robots fighting in a rectangular arena.
Each robot is steered by an *agent* that looks at what the robot can see and
decides how fast to drive, how to turn, where to point its turret and whether
to fire. The simulation moves robots and projectiles, resolves collisions
between rectangles with the separating axis theorem, applies damage and
removes robots whose health has run out.

The package has no dependencies outside the standard library.

## Building blocks

- `robotarena.vector` – `Vector`, an immutable 2D vector supporting `+`, `-`,
  scalar `*` and `/`, negation and iteration, with `dot`, `perp(clockwise)`,
  `magnitude`, `angle`, `rotated` and the constructors `polar`, `zero`, `one`,
  `unit_x` and `unit_y`; plus a free function `dot(a, b)`.
- `robotarena.mathutil` – `modulus`, `wrap`, `clamp`, `lerp`, `wrap_radians`
  (into `[-pi, pi)`) and `ang_diff_radians`.
- `robotarena.rectangle` – `Rectangle(size, position, rotation)`, an oriented
  rectangle that can be moved, rotated and resized (by a number or
  component-wise by a vector). `vertices()` returns its corners in world
  coordinates; `str()` gives `Rectangle((10, 10), (0, 0), 0)`.
- `robotarena.collision` – `collides(rect1, rect2)` and its helpers
  `project`, `get_axes` and `Projection`.
- `robotarena.rules` – `Rules`, a frozen dataclass with every tunable constant
  of a match (time step, scan range and angle, robot, arena and projectile
  sizes, speed and turn limits, damage values, cooldown…). It reads JSON with
  `from_json` and `load`; entries missing from the JSON keep their defaults,
  and a value that is not a number raises `ValueError`. `to_json` and `dump`
  write it back; `turret_w_max` is read but not written.
- `robotarena.signals` – `Signal` and `Slot`, a small observer mechanism.
  A signal calls every connected slot; plain callables may be connected
  directly. A `Slot` is disconnected from all its signals by `disconnect()` or
  when it is garbage collected.
- `robotarena.robot` – `Robot`, the abstract `Agent` base class and the
  `Action` an agent returns (`v`, `w`, `turret_angle`, `shooting`).
- `robotarena.simulation` – `Simulation(rules, seed)`, the world: the
  `players` and `projectiles` in play, the `runtime`, `new_player` (random
  position and rotation when none is given), `update`, `runtime_string`,
  `num_players`, and the signals `death_signal`, `new_player_signal`,
  `collision_signal`, `hit_signal`, `out_of_bounds_signal` and
  `simulation_step_signal`.
- `robotarena.agents` – ready-made agents: `Follower`, `Hunter`, `Orbiter`,
  `Simon`, `Sniper` and `Wanderer`.
- `robotarena.factory` – `AgentFactory`, whose `create_agent()` hands out
  those agents in turn.
- `robotarena.frametimer` – `FrameTimer`, which measures frame durations,
  can wait out a fixed time step in `sync()`, and reports them with `output()`.
- `robotarena.views` – the abstract `View` interface and `ConsoleView`, which
  prints the runtime and each robot's position and health to a text stream
  after every step, and prefixes log lines with the runtime.
- `robotarena.game` – `Game(simulation, view, starting_lives=3)` ties a
  simulation and a view together, keeps track of lives, respawns robots that
  die while their player has lives left, and announces the winner once at
  most one robot remains.

## Example

```python
from robotarena.factory import AgentFactory
from robotarena.game import Game
from robotarena.rules import Rules
from robotarena.simulation import Simulation
from robotarena.views import ConsoleView

simulation = Simulation(Rules(), seed=42)
game = Game(simulation, ConsoleView())

factory = AgentFactory()
for name in ("alpha", "bravo", "charlie"):
    game.add_player(name, factory)

game.run()
```

When the game is over, `ConsoleView.finish()` prints `Press enter to quit.`
and waits for a character on its input stream (standard input by default).

Custom rules can be stored as JSON:

```python
from robotarena.rules import Rules

rules = Rules.from_json('{"v_max": 150, "arena_size": {"x": 2000, "y": 1200}}')
print(rules.to_json())
```

## Writing an agent

Subclass `Agent` and return an `Action` from `update(robot)`. The robot passed
in offers `scan_closest()`, `scan_any()` and `scan_all()` to find the robots
inside its field of view, its `position`, `rotation`, `turret_angle` and
`health`, and the match rules through its `rules` attribute. Speeds and turn
rates are clamped to the limits in `Rules`, the turret turns at most
`turret_w_max` per second, and a shot is fired only once the cooldown has
passed.

## What it does not do

There is no graphical display and no command-line program: the only view is
`ConsoleView`, and a game is started from Python code as in the example.

## Running the tests

The tests use pytest, installed with the `test` extra.