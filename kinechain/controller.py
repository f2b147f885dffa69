"""The application controller: routes input to the model and keeps the views in sync."""

from __future__ import annotations

from .chain import ChainParameters
from .configuration_space import ConfigurationSpaceManager
from .geometry import Rectangle, Vec2
from .mouse import MouseButton, MouseState
from .obstacles import ObstaclesManager
from .reachability import ReachabilityRenderer
from .scene import SceneVisualization

OPTIONS_WINDOW_NAME = "Options"
MIN_ARM_LENGTH = 0.01
ARM_STEP = 0.1
SCROLL_SENSITIVITY = 0.7
INITIAL_TARGET = Vec2(0.5, 0.5)


class MainController:
    """Owns the model and the views and reacts to mouse and option changes."""

    def __init__(self, resolution_alpha: int = 360, resolution_beta: int = 360) -> None:
        self.mouse_state = MouseState()
        self.scene = SceneVisualization(1280, 920)
        self.reachability = ReachabilityRenderer(resolution_alpha, resolution_beta)
        self.obstacles = ObstaclesManager()
        self.configuration_space_manager = ConfigurationSpaceManager(
            resolution_alpha, resolution_beta
        )
        self.reachability_version = 0

        self.new_rectangle = Rectangle()
        self.new_rectangle_first_corner = Vec2(0.0, 0.0)
        self.act_target = INITIAL_TARGET

        initial = ChainParameters()
        self.scene.set_chain_parameters(initial)
        self.obstacles.set_chain_parameters(initial)

        self._reach_target()
        self._update_configuration_space()

    def mouse_clicked(self, button: MouseButton) -> None:
        button = MouseButton(button)
        self.mouse_state.button_clicked(button)

        if button is MouseButton.LEFT and self.scene.mouse_over:
            self.act_target = self.screen_position_to_scene(self.mouse_state.position())
            self._reach_target()

        if button is MouseButton.RIGHT and self.scene.mouse_over:
            self.new_rectangle_first_corner = self.screen_position_to_scene(
                self.mouse_state.position()
            )
            self.new_rectangle = Rectangle(self.new_rectangle_first_corner, 0.0, 0.0)
            self.scene.add_rectangle(self.new_rectangle)
            self.obstacles.add_rectangle(self.new_rectangle)
            self._reach_target()

    def mouse_released(self, button: MouseButton) -> None:
        button = MouseButton(button)
        self.mouse_state.button_released(button)

        if button is MouseButton.RIGHT and self.scene.mouse_over:
            self._update_configuration_space()

    def mouse_moved(self, x: float, y: float) -> None:
        self.mouse_state.moved(float(x), float(y))

        if self.mouse_state.is_button_clicked(MouseButton.LEFT) and self.scene.mouse_over:
            self.act_target = self.screen_position_to_scene(self.mouse_state.position())
            self._reach_target()

        if self.mouse_state.is_button_clicked(MouseButton.RIGHT) and self.scene.mouse_over:
            new_corner = self.screen_position_to_scene(self.mouse_state.position())
            updated = Rectangle.from_corners(self.new_rectangle_first_corner, new_corner)

            self.scene.edit_rectangle(self.new_rectangle, updated)
            self.obstacles.edit_rectangle(self.new_rectangle, updated)
            self.new_rectangle = updated

            self._reach_target()

    def scroll_moved(self, offset: int) -> float:
        """The zoom factor one scroll step of the given size corresponds to."""
        value = offset * SCROLL_SENSITIVITY
        if value < 0.0:
            value = -1.0 / value
        return value

    def chain_parameters(self) -> ChainParameters:
        return self.scene.chain_parameters()

    def set_chain_parameters(self, params: ChainParameters) -> None:
        self.scene.set_chain_parameters(params)
        self.obstacles.set_chain_parameters(params)
        self._reach_target()
        self._update_configuration_space()

    def adjust_arm(self, arm: int, delta: float) -> ChainParameters:
        """Change the length of arm 1 or 2 by delta, never below the minimum length."""
        current = self.chain_parameters()
        if arm == 1:
            params = ChainParameters(max(MIN_ARM_LENGTH, current.l1 + delta), current.l2)
        elif arm == 2:
            params = ChainParameters(current.l1, max(MIN_ARM_LENGTH, current.l2 + delta))
        else:
            raise ValueError(f"the chain has arms 1 and 2, not {arm}")
        self.set_chain_parameters(params)
        return self.chain_parameters()

    def screen_position_to_scene(self, screen_position: Vec2) -> Vec2:
        """Scene coordinates of a screen position inside the scene panel."""
        relative = screen_position - self.scene.window_center()
        system = self.scene.coordinate_system
        x = relative.x / (self.scene.window_width() / (system.max_x * 2.0))
        y = relative.y / (self.scene.window_height() / (system.max_y * 2.0))
        return Vec2(x, -y)

    def _reach_target(self) -> None:
        self.scene.update_chain(self.obstacles.try_to_reach(self.act_target))

    def _update_configuration_space(self) -> None:
        space = self.configuration_space_manager.calculate_reachability(self.obstacles)
        self.reachability.update(space)
        self.reachability_version += 1