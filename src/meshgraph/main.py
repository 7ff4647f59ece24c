"""
Application Initialization
==========================
Builds a small demo mesh and animates its rotation in a PyVista window.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Parses the command line and sets up logging.
2. Builds the canonical MeshGraph (Model).
3. Creates the MeshPlotter (View) and hands both to the Animator.
"""
import argparse
import logging
from typing import Optional

from meshgraph.config import FRAME_INTERVAL
from meshgraph.logging_config import setup_logging
from meshgraph.model import Coordinates, MeshGraph
from meshgraph.view import Animator, MeshPlotter

logger = logging.getLogger(__name__)


def build_demo_graph() -> MeshGraph:
    """Two triangles sharing the diagonal of a 10 x 10 square, plus a midpoint on its bottom side."""
    graph = MeshGraph("demo")
    a = graph.insert_vertex("A", Coordinates(0.0, 0.0, 0.0))
    b = graph.insert_vertex("B", Coordinates(10.0, 0.0, 0.0))
    c = graph.insert_vertex("C", Coordinates(0.0, 10.0, 0.0))
    d = graph.insert_vertex("D", Coordinates(10.0, 10.0, 0.0))
    graph.insert_vertex("M", Coordinates(5.0, 0.0, 0.0))

    graph.insert_edge("AC", a, c, border=True)
    graph.insert_edge("CD", c, d, border=True)
    graph.insert_edge("DB", d, b, border=True)
    graph.insert_edge("BC", b, c, border=False)

    graph.insert_face("F1", a, b, c)
    graph.insert_face("F2", b, d, c)

    for vertex in graph.get_vertices_between(a, b):
        logger.info(f"Vertex '{vertex.id}' lies on the open side A-B.")
    return graph


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Animate the rotation of a demo mesh graph')

    parser.add_argument('--frames',
                        type=int,
                        default=None,
                        help='stop after this many frames (default: full sweep)')
    parser.add_argument('--interval',
                        type=float,
                        default=FRAME_INTERVAL,
                        help='pause between frames in seconds')
    parser.add_argument('--log-file',
                        type=str,
                        default=None,
                        help='also write the log to this file')
    parser.add_argument('--debug',
                        action='store_true',
                        help='log at DEBUG level')
    parser.add_argument('--log-frames',
                        action='store_true',
                        help='log every displayed frame')

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_file=args.log_file,
        log_frames=args.log_frames,
    )

    graph = build_demo_graph()
    logger.info(f"Built {graph}.")

    plotter = MeshPlotter()
    try:
        Animator(graph, plotter, interval=args.interval, max_frames=args.frames).run()
    finally:
        plotter.close()


if __name__ == "__main__":
    main()
