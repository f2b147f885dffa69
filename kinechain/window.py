"""The application window: panel layout, event loop and drawing."""

from __future__ import annotations

import argparse
from typing import Optional

import pygame

from .controller import ARM_STEP, OPTIONS_WINDOW_NAME, MainController
from .geometry import Vec2
from .mouse import MouseButton
from .scene import SceneVisualization

CONFIGURATION_SPACE_WINDOW_NAME = "Configuration space visualization"
SCENE_WINDOW_NAME = SceneVisualization.WINDOW_NAME

_BACKGROUND = (15, 15, 15)
_SCENE_BACKGROUND = (25, 25, 25)
_TEXT_COLOR = (220, 220, 220)
_FRAME_RATE = 60

_MOUSE_BUTTONS = {
    pygame.BUTTON_LEFT: MouseButton.LEFT,
    pygame.BUTTON_MIDDLE: MouseButton.MIDDLE,
    pygame.BUTTON_RIGHT: MouseButton.RIGHT,
}

_ARM_KEYS = {
    pygame.K_q: (1, ARM_STEP),
    pygame.K_a: (1, -ARM_STEP),
    pygame.K_w: (2, ARM_STEP),
    pygame.K_s: (2, -ARM_STEP),
}


class WindowCreationError(RuntimeError):
    """Raised when the display or the window cannot be set up."""


def map_mouse_button(button: int) -> Optional[MouseButton]:
    """The mouse button for a pygame button number, or None for others."""
    return _MOUSE_BUTTONS.get(button)


def dock_layout(width: int, height: int) -> dict[str, tuple[int, int, int, int]]:
    """Panel rectangles (x, y, width, height): options take the right quarter,
    the configuration space half of the rest, the scene what remains on the left."""
    options_width = round(width * 0.25)
    rest = width - options_width
    configuration_width = round(rest * 0.5)
    scene_width = rest - configuration_width
    return {
        SCENE_WINDOW_NAME: (0, 0, scene_width, height),
        CONFIGURATION_SPACE_WINDOW_NAME: (scene_width, 0, configuration_width, height),
        OPTIONS_WINDOW_NAME: (scene_width + configuration_width, 0, options_width, height),
    }


def _to_rgb(color: tuple[float, ...]) -> tuple[int, int, int]:
    r, g, b = color[:3]
    return round(r * 255), round(g * 255), round(b * 255)


class Window:
    """A resizable window showing the scene, the configuration space and the options."""

    _instances = 0

    def __init__(self, width: int, height: int, name: str) -> None:
        if Window._instances == 0:
            self._initialize_display()

        try:
            pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.quit()
            raise WindowCreationError("Cannot create window") from exc
        pygame.display.set_caption(name)
        Window._instances += 1

        self._closed = False
        self.running = False
        self.frames = 0
        self.controller = MainController()
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 20)
        self._reachability_version = -1
        self._reachability_pixels = bytearray()
        self._reachability_surface: Optional[pygame.Surface] = None

    @staticmethod
    def _initialize_display() -> None:
        try:
            pygame.display.init()
            pygame.font.init()
        except pygame.error as exc:
            raise WindowCreationError("Cannot initialize window module") from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        Window._instances -= 1
        if Window._instances == 0:
            pygame.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run(self) -> None:
        """Draw and handle events until the window is closed."""
        self.running = True
        while self.running:
            self._render()
            self._handle_events()
            pygame.display.flip()
            self._clock.tick(_FRAME_RATE)

    def _handle_events(self) -> None:
        controller = self.controller
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEMOTION:
                controller.mouse_moved(*event.pos)
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                button = map_mouse_button(event.button)
                if button is None:
                    continue
                if event.type == pygame.MOUSEBUTTONDOWN:
                    controller.mouse_clicked(button)
                else:
                    controller.mouse_released(button)
            elif event.type == pygame.MOUSEWHEEL:
                controller.scroll_moved(event.y)
            elif event.type == pygame.KEYDOWN and event.key in _ARM_KEYS:
                controller.adjust_arm(*_ARM_KEYS[event.key])

    def _render(self) -> None:
        surface = pygame.display.get_surface()
        surface.fill(_BACKGROUND)
        layout = dock_layout(*surface.get_size())
        self._render_scene(surface, pygame.Rect(layout[SCENE_WINDOW_NAME]))
        self._render_configuration_space(
            surface, pygame.Rect(layout[CONFIGURATION_SPACE_WINDOW_NAME])
        )
        self._render_options(surface, pygame.Rect(layout[OPTIONS_WINDOW_NAME]))
        self.frames += 1

    def _render_scene(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        scene = self.controller.scene
        mouse_over = bool(pygame.mouse.get_focused()) and rect.collidepoint(
            pygame.mouse.get_pos()
        )
        scene.set_viewport(
            Vec2(rect.left, rect.top), Vec2(rect.right, rect.bottom), mouse_over
        )

        surface.fill(_SCENE_BACKGROUND, rect)
        surface.set_clip(rect)

        chain_color = _to_rgb(scene.rectangles.color)
        for triangle in scene.rectangles.triangles():
            points = [tuple(scene.to_screen(p)) for p in triangle]
            pygame.draw.polygon(surface, chain_color, points)

        for drawable in scene.chain.drawables():
            points = [tuple(scene.to_screen(p)) for p in drawable.points]
            pygame.draw.lines(surface, _to_rgb(drawable.color), False, points, 2)

        surface.set_clip(None)

    def _render_configuration_space(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        reachability = self.controller.reachability
        if self._reachability_version != self.controller.reachability_version:
            pixels = bytearray()
            # The image is shown flipped vertically: beta grows upwards.
            for row in reversed(reachability.rows()):
                for color in row:
                    pixels.extend(_to_rgb(color))
            self._reachability_pixels = pixels
            size = (reachability.width, reachability.height)
            self._reachability_surface = (
                pygame.image.frombuffer(pixels, size, "RGB") if all(size) else None
            )
            self._reachability_version = self.controller.reachability_version

        if self._reachability_surface is not None and rect.width > 0 and rect.height > 0:
            scaled = pygame.transform.scale(self._reachability_surface, rect.size)
            surface.blit(scaled, rect.topleft)

    def _render_options(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        params = self.controller.chain_parameters()
        lines = (
            "Kinematic chain options",
            f"First section length: {params.l1:.2f}",
            f"Second section length: {params.l2:.2f}",
            "Q / A: lengthen / shorten first section",
            "W / S: lengthen / shorten second section",
        )
        surface.set_clip(rect)
        y = rect.top + 10
        for line in lines:
            text = self._font.render(line, True, _TEXT_COLOR)
            surface.blit(text, (rect.left + 10, y))
            y += text.get_height() + 6
        surface.set_clip(None)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Kinematic chain simulation")
    parser.add_argument("--width", type=int, default=600)
    parser.add_argument("--height", type=int, default=400)
    args = parser.parse_args(argv)

    with Window(args.width, args.height, "Kinematic chain simulation") as window:
        window.run()
    return 0