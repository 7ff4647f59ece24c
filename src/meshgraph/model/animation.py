"""
Rotation frames for animated display.

The canonical graph is cloned once into a working copy; every frame rotates
the working copy a bit further and yields a fresh clone of it, so consumers can
hold on to (or mutate) a frame without affecting the next one.
"""
from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from meshgraph.config import ANIMATION_ROLL, ANIMATION_START, ANIMATION_STEP, ANIMATION_STOP
from meshgraph.model.graph import MeshGraph

logger = logging.getLogger(__name__)


def rotation_frames(
    graph: MeshGraph,
    start: float = ANIMATION_START,
    stop: float = ANIMATION_STOP,
    step: float = ANIMATION_STEP,
    yaw: float = 0.0,
    roll: float = ANIMATION_ROLL,
) -> Iterator[MeshGraph]:
    """
    Yield rotated snapshots of `graph`.

    For each pitch in ``numpy.arange(start, stop, step)`` the working copy is
    rotated by ``(pitch, yaw, roll)`` on top of all previous frames.

    Args:
        graph: Source graph; never mutated.
        start: First pitch increment in radians.
        stop: Exclusive upper bound of the pitch increments.
        step: Distance between consecutive pitch increments.
        yaw: Yaw applied on every frame.
        roll: Roll applied on every frame.

    Yields:
        An independent clone per frame.
    """
    if step <= 0.0:
        raise ValueError(f"Animation step must be positive, got {step}.")

    working = MeshGraph.clone(graph)
    pitches = np.arange(start, stop, step)
    logger.info(f"Generating {len(pitches)} rotation frames for graph '{graph.graph_id}'.")

    for pitch in pitches:
        working.rotate(float(pitch), yaw, roll)
        yield MeshGraph.clone(working)
