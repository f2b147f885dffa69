"""The two-arm kinematic chain: parameters, joint states and forward kinematics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .angle import Angle, cos, sin
from .geometry import Vec2


@dataclass
class ChainParameters:
    """Arm lengths of the chain."""

    l1: float = 1.0
    l2: float = 1.0


@dataclass(frozen=True)
class ChainState:
    """Joint angles: alpha at the base, beta at the elbow relative to the first arm."""

    alpha: Angle = Angle(0.0)
    beta: Angle = Angle(0.0)


@dataclass
class CoordinateSystem:
    """Half-extents of the visible scene."""

    max_x: float = 3.0
    max_y: float = 3.0


class KinematicChain:
    """Positions of the base, joint and end effector for a given state."""

    __slots__ = ("base", "joint", "end")

    def __init__(self, params: ChainParameters, state: ChainState) -> None:
        self.base = Vec2(0.0, 0.0)
        self.joint = Vec2(params.l1 * cos(state.alpha), params.l1 * sin(state.alpha))
        total = state.alpha + state.beta
        self.end = Vec2(
            self.joint.x + params.l2 * cos(total),
            self.joint.y + params.l2 * sin(total),
        )

    def __repr__(self) -> str:
        return f"KinematicChain(base={self.base}, joint={self.joint}, end={self.end})"


@dataclass(frozen=True)
class NoPossibleChainStates:
    """The target cannot be reached."""

    @property
    def states(self) -> tuple[ChainState, ...]:
        return ()


@dataclass(frozen=True)
class OnePossibleChainState:
    """Exactly one state reaches the target."""

    state: ChainState

    @property
    def states(self) -> tuple[ChainState, ...]:
        return (self.state,)


@dataclass(frozen=True)
class TwoPossibleChainStates:
    """Two states (elbow up and elbow down) reach the target."""

    state1: ChainState
    state2: ChainState

    @property
    def states(self) -> tuple[ChainState, ...]:
        return (self.state1, self.state2)


PossibleChainStates = Union[
    NoPossibleChainStates, OnePossibleChainState, TwoPossibleChainStates
]