"""Rectangular obstacles and the inverse kinematics that avoids them."""

from __future__ import annotations

import math

from .angle import Angle, acos, atan2
from .chain import (
    ChainParameters,
    ChainState,
    KinematicChain,
    NoPossibleChainStates,
    OnePossibleChainState,
    PossibleChainStates,
    TwoPossibleChainStates,
)
from .geometry import Rectangle, Vec2
from .intersections import segment_intersects_rectangle


class ObstacleNotFoundError(LookupError):
    """Raised when an obstacle to be edited is not present."""


def _ratio(numerator: float, denominator: float) -> float:
    # Division by zero yields NaN or infinity; both give a NaN arc cosine.
    if denominator == 0.0:
        return math.nan
    return numerator / denominator


class ObstaclesManager:
    """Holds the obstacles and finds chain states reaching a target without collision."""

    def __init__(self) -> None:
        self._rectangles: list[Rectangle] = []
        self.chain_parameters = ChainParameters()

    @property
    def rectangles(self) -> tuple[Rectangle, ...]:
        return tuple(self._rectangles)

    def try_to_reach(self, target: Vec2) -> PossibleChainStates:
        """Chain states reaching the target that do not touch any obstacle."""
        return self._without_collisions(self.inverse_kinematics(target))

    def inverse_kinematics(self, end_point: Vec2) -> PossibleChainStates:
        """All chain states placing the end effector at the point, ignoring obstacles."""
        l1 = self.chain_parameters.l1
        l2 = self.chain_parameters.l2
        length = end_point.length()

        if l1 + l2 < length:
            return NoPossibleChainStates()

        a = atan2(end_point.y, end_point.x)

        if l1 + l2 == length:
            return OnePossibleChainState(ChainState(a, Angle.from_radians(0.0)))

        l1_squared = l1 * l1
        l2_squared = l2 * l2
        length_squared = end_point.x * end_point.x + end_point.y * end_point.y

        b = acos(_ratio(l1_squared + length_squared - l2_squared, 2.0 * l1 * length))
        c = acos(_ratio(l1_squared + l2_squared - length_squared, 2.0 * l1 * l2))

        half_turn = Angle.from_degrees(180.0)
        return TwoPossibleChainStates(
            ChainState(a + b, half_turn + c),
            ChainState(a - b, half_turn - c),
        )

    def collides_with_rectangles(self, state: ChainState) -> bool:
        """Whether either arm of the chain in this state touches an obstacle."""
        chain = KinematicChain(self.chain_parameters, state)
        return any(
            segment_intersects_rectangle(rect, chain.base, chain.joint)
            or segment_intersects_rectangle(rect, chain.joint, chain.end)
            for rect in self._rectangles
        )

    def set_chain_parameters(self, params: ChainParameters) -> None:
        self.chain_parameters = ChainParameters(params.l1, params.l2)

    def add_rectangle(self, rectangle: Rectangle) -> None:
        self._rectangles.append(rectangle)

    def edit_rectangle(self, old_rectangle: Rectangle, new_rectangle: Rectangle) -> None:
        """Replace the most recently added obstacle equal to old_rectangle."""
        for index in reversed(range(len(self._rectangles))):
            if self._rectangles[index] == old_rectangle:
                self._rectangles[index] = new_rectangle
                return
        raise ObstacleNotFoundError("Cannot find rectangle to modify")

    def number_of_obstacles(self) -> int:
        return len(self._rectangles)

    def _without_collisions(self, states: PossibleChainStates) -> PossibleChainStates:
        match states:
            case OnePossibleChainState(state=state):
                if self.collides_with_rectangles(state):
                    return NoPossibleChainStates()
                return states
            case TwoPossibleChainStates(state1=first, state2=second):
                first_collides = self.collides_with_rectangles(first)
                second_collides = self.collides_with_rectangles(second)
                if not first_collides and not second_collides:
                    return states
                if not first_collides:
                    return OnePossibleChainState(first)
                if not second_collides:
                    return OnePossibleChainState(second)
                return NoPossibleChainStates()
            case _:
                return states