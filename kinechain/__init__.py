"""Two-arm kinematic chain simulation: inverse kinematics, rectangular obstacles,
a configuration-space collision map and a pygame window to explore them."""

__version__ = "0.1.0"