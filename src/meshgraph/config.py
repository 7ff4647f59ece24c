"""
Configuration & Global Constants
================================
This module serves as the central registry for numeric tolerances, default
rotation steps and the display hints handed to the viewer.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (tolerances, angle increments)
   scattered throughout the model code.
2. Decoupling: The model only stores opaque style strings; the view decides
   what they mean. Both sides read the same names from here.

Exports:
    COLLINEARITY_TOLERANCE (float): Max |det| for three points to count as collinear.
    DEFAULT_ROTATION_STEP (RotationStep): Increment used by argument-less rotations.
"""
from typing import NamedTuple


class RotationStep(NamedTuple):
    """Euler angles in radians."""
    pitch: float
    yaw: float
    roll: float


# Geometry
COLLINEARITY_TOLERANCE: float = 1e-3
DEFAULT_ROTATION_STEP: RotationStep = RotationStep(pitch=0.0, yaw=0.0, roll=0.01)

# Display hints (opaque to the model)
PLACEHOLDER_FACE_STYLE: str = "fill-color: red;"
TRIANGLE_FACE_CLASS: str = "important"
FACE_EDGE_STYLE: str = "fill-color: blue;"

VERTEX_COLOR: str = "black"
FACE_NODE_COLOR: str = "red"
BORDER_EDGE_COLOR: str = "black"
INTERIOR_EDGE_COLOR: str = "blue"

# Animation
ANIMATION_START: float = 0.0
ANIMATION_STOP: float = 3.0
ANIMATION_STEP: float = 0.005
ANIMATION_ROLL: float = 0.01
FRAME_INTERVAL: float = 0.5  # seconds
