"""The scene view: chain and obstacles in a scaled coordinate system."""

from __future__ import annotations

from .chain import ChainParameters, CoordinateSystem, PossibleChainStates
from .chain_renderer import ChainRenderer
from .geometry import Rectangle, Vec2
from .rectangles_renderer import RectanglesRenderer


class SceneVisualization:
    """State of the scene panel: what is drawn and where on screen it lies."""

    WINDOW_NAME = "Scene sceneVisualization"

    def __init__(self, x_resolution: int = 1280, y_resolution: int = 920) -> None:
        self.resolution = (x_resolution, y_resolution)
        self.chain = ChainRenderer()
        self.rectangles = RectanglesRenderer()
        self.coordinate_system = CoordinateSystem()
        self.upper_left = Vec2(0.0, 0.0)
        self.lower_right = Vec2(0.0, 0.0)
        self.mouse_over = False

    def update_chain(self, states: PossibleChainStates) -> None:
        self.chain.update(states)

    def set_chain_parameters(self, parameters: ChainParameters) -> None:
        self.chain.parameters = ChainParameters(parameters.l1, parameters.l2)

    def chain_parameters(self) -> ChainParameters:
        return self.chain.parameters

    def add_rectangle(self, rectangle: Rectangle) -> None:
        self.rectangles.add_rectangle(rectangle)

    def edit_rectangle(self, old_rectangle: Rectangle, new_rectangle: Rectangle) -> None:
        self.rectangles.edit_rectangle(old_rectangle, new_rectangle)

    def set_viewport(self, upper_left: Vec2, lower_right: Vec2, mouse_over: bool) -> None:
        """Record the on-screen area of the scene and whether the cursor is over it."""
        self.upper_left = upper_left
        self.lower_right = lower_right
        self.mouse_over = bool(mouse_over)

    def window_width(self) -> float:
        return self.lower_right.x - self.upper_left.x

    def window_height(self) -> float:
        return self.lower_right.y - self.upper_left.y

    def window_center(self) -> Vec2:
        return (self.upper_left + self.lower_right) / 2.0

    def to_screen(self, point: Vec2) -> Vec2:
        """Screen position of a scene point; scene y grows upwards."""
        center = self.window_center()
        scale_x = self.window_width() / (self.coordinate_system.max_x * 2.0)
        scale_y = self.window_height() / (self.coordinate_system.max_y * 2.0)
        return Vec2(center.x + point.x * scale_x, center.y - point.y * scale_y)