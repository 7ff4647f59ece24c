"""
Animation Driver
================
Feeds rotation frames of a MeshGraph to a display and paces them.

Why is this file needed?
------------------------
The model only knows how to produce rotated snapshots. Timing between frames
is a presentation concern and lives here, next to the plotter.

Classes:
    Animator: Clone -> rotate -> display loop.
"""
from __future__ import annotations

import logging
import time
from itertools import islice
from typing import Optional, Protocol

from meshgraph.config import ANIMATION_ROLL, ANIMATION_START, ANIMATION_STEP, ANIMATION_STOP, FRAME_INTERVAL
from meshgraph.model.animation import rotation_frames
from meshgraph.model.graph import MeshGraph

logger = logging.getLogger(__name__)


class FrameDisplay(Protocol):
    def show(self, graph: MeshGraph) -> None: ...
    def update(self, graph: MeshGraph) -> None: ...


class Animator:
    def __init__(
        self,
        graph: MeshGraph,
        display: FrameDisplay,
        interval: float = FRAME_INTERVAL,
        max_frames: Optional[int] = None,
    ) -> None:
        """
        Args:
            graph: Canonical graph; it is shown as-is and never rotated.
            display: Anything with `show` and `update`, usually a MeshPlotter.
            interval: Pause between frames in seconds.
            max_frames: Stop after this many frames (None runs the full sweep).
        """
        self.graph = graph
        self.display = display
        self.interval = interval
        self.max_frames = max_frames
        self.is_running = False

    def run(
        self,
        start: float = ANIMATION_START,
        stop: float = ANIMATION_STOP,
        step: float = ANIMATION_STEP,
        roll: float = ANIMATION_ROLL,
    ) -> int:
        """
        Show the canonical graph, then each rotation frame in turn.

        At most `max_frames` frames are produced; `stop()` ends the loop after
        the frame being displayed.

        Returns:
            Number of frames handed to the display.
        """
        frames = rotation_frames(self.graph, start=start, stop=stop, step=step, roll=roll)
        if self.max_frames is not None:
            frames = islice(frames, self.max_frames)

        self.is_running = True
        count = 0
        try:
            self.display.show(self.graph)
            for frame in frames:
                self.display.update(frame)
                count += 1
                logger.debug(f"Displayed frame {count}: {frame}.")
                if not self.is_running:
                    break
                if self.interval > 0:
                    time.sleep(self.interval)
        finally:
            self.is_running = False

        logger.info(f"Animation finished after {count} frames.")
        return count

    def stop(self) -> None:
        self.is_running = False
