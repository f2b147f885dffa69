# kinechain

An interactive simulation of a planar kinematic chain with two arms. The chain
reaches for a target point with inverse kinematics and avoids rectangular
obstacles that you draw. Next to the scene, a configuration-space map shows
which joint angle pairs (alpha, beta) would make the chain touch an obstacle.

## Installation

```
pip install .
```

The window is drawn with pygame.

## Running

```
kinechain
```

This opens the simulation window, 600 x 400 pixels by default. The size can be
set with `--width` and `--height`:

```
kinechain --width 1200 --height 800
```

The window is split into three panels: the scene on the left, the
configuration-space map in the middle and the options on the right (a quarter
of the width).

- **Left mouse button** (click or drag) in the scene moves the target. The
  chain shows up to two solutions: blue for the first, grey for the second. A
  solution that touches an obstacle is hidden.
- **Right mouse button** (drag) in the scene draws a rectangular obstacle. The
  configuration-space map is recalculated when the button is released over the
  scene. Red cells are joint configurations that touch an obstacle; alpha runs
  across the map and beta grows upwards, each over a full turn.
- **Q / A** lengthen / shorten the first arm section, **W / S** the second, in
  steps of 0.1 and never below 0.01. The options panel shows the current
  lengths. Changing a length recalculates the map.

The scene spans -3 to 3 on both axes around the chain's base.

## Using the model from Python

The geometry and planning parts work without a window:

```python
from kinechain.chain import ChainParameters
from kinechain.geometry import Rectangle, Vec2
from kinechain.obstacles import ObstaclesManager
from kinechain.configuration_space import ConfigurationSpaceManager

obstacles = ObstaclesManager()
obstacles.set_chain_parameters(ChainParameters(l1=1.0, l2=1.0))
obstacles.add_rectangle(Rectangle.from_corners(Vec2(0.5, 0.5), Vec2(1.0, 1.0)))

states = obstacles.try_to_reach(Vec2(1.2, 0.3))
for state in states.states:
    print(state.alpha.to_degrees(), state.beta.to_degrees())

space = ConfigurationSpaceManager(360, 360).calculate_reachability(obstacles)
print(space[0, 0])  # 255 if the state (0 deg, 0 deg) collides, 0 otherwise
```

`try_to_reach` returns a `NoPossibleChainStates`, `OnePossibleChainState` or
`TwoPossibleChainStates`, holding the joint angles of the solutions that do not
touch any obstacle; `inverse_kinematics` gives the solutions without checking
obstacles. `KinematicChain(params, state)` gives the base, joint and end
positions for a state, and `kinechain.intersections` has the segment and
rectangle intersection tests used for collisions.

## What it does not do

- Obstacles can be added and resized while drawing, but not removed or saved.
- There is no path planning through the configuration space; the map only
  shows which configurations collide.
- The mouse wheel does not zoom the scene.

## Tests

```
pip install ".[test]"
pytest
```