import pytest

from kinechain.chain import ChainState
from kinechain.configuration_space import (
    COLLISION,
    FREE,
    ConfigurationSpace,
    ConfigurationSpaceManager,
)
from kinechain.geometry import Rectangle, Vec2
from kinechain.obstacles import ObstaclesManager


def test_resolutions_follow_constructor():
    space = ConfigurationSpace(4, 6)
    assert space.alpha_resolution() == 4
    assert space.beta_resolution() == 6
    assert len(space.values()) == 24


def test_first_index_is_zero_state():
    space = ConfigurationSpace(360, 360)
    assert space.indices_to_state(0, 0) == ChainState()


def test_indices_map_to_degrees():
    space = ConfigurationSpace(360, 360)
    state = space.indices_to_state(90, 180)
    assert state.alpha.to_degrees() == pytest.approx(90.0)
    assert state.beta.to_degrees() == pytest.approx(180.0)


def test_indices_scale_with_resolution():
    space = ConfigurationSpace(4, 8)
    state = space.indices_to_state(1, 1)
    assert state.alpha.to_degrees() == pytest.approx(360.0 / 4)
    assert state.beta.to_degrees() == pytest.approx(360.0 / 8)


def test_cells_can_be_set_and_read():
    space = ConfigurationSpace(3, 2, 0)
    space[2, 1] = 7
    assert space[2, 1] == 7
    assert space.values()[-1] == 7
    assert space[0, 0] == 0


def test_out_of_range_cell_raises():
    space = ConfigurationSpace(3, 2, 0)
    with pytest.raises(IndexError):
        space[3, 0]
    with pytest.raises(IndexError):
        space[3, 0] = 1
    assert space.values() == [0] * 6


def test_no_obstacles_gives_free_space():
    manager = ConfigurationSpaceManager(12, 10)
    space = manager.calculate_reachability(ObstaclesManager())
    assert len(space.values()) == 120
    assert all(value == FREE for value in space.values())


def test_cells_match_collision_checks():
    obstacles = ObstaclesManager()
    obstacles.add_rectangle(Rectangle(Vec2(0.5, -0.1), 0.2, 0.2))
    manager = ConfigurationSpaceManager(24, 24)
    space = manager.calculate_reachability(obstacles)
    assert space[0, 0] == COLLISION
    assert COLLISION == 255
    for alpha_index in range(24):
        for beta_index in range(24):
            state = space.indices_to_state(alpha_index, beta_index)
            expected = COLLISION if obstacles.collides_with_rectangles(state) else FREE
            assert space[alpha_index, beta_index] == expected
    assert FREE in space.values()


def test_recalculation_clears_previous_collisions():
    obstacles = ObstaclesManager()
    obstacles.add_rectangle(Rectangle(Vec2(0.5, -0.1), 0.2, 0.2))
    manager = ConfigurationSpaceManager(8, 8)
    first = manager.calculate_reachability(obstacles)
    assert COLLISION in first.values()
    second = manager.calculate_reachability(ObstaclesManager())
    assert second is first
    assert all(value == FREE for value in second.values())