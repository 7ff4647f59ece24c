"""
3D Visualization (PyVista Wrapper)
Reads a MeshGraph and draws its nodes and edges. Never mutates the graph.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import numpy.typing as npt
import pyvista as pv

from meshgraph.config import (
    BORDER_EDGE_COLOR,
    FACE_NODE_COLOR,
    INTERIOR_EDGE_COLOR,
    TRIANGLE_FACE_CLASS,
    VERTEX_COLOR,
)
from meshgraph.model.graph import MeshGraph

logger = logging.getLogger(__name__)

# Style keys that carry a colour, in lookup order
COLOR_STYLE_KEYS = ("fill-color", "color")

POINT_SIZE = 8.0
IMPORTANT_POINT_SIZE = 14.0


def style_color(style: Optional[str], fallback: str) -> tuple[float, float, float]:
    """
    Resolve a free-form style hint such as ``"fill-color: red;"`` to an RGB triple.

    Hints without a recognised colour (e.g. ``"render as boundary"``) use `fallback`.
    """
    declarations = {}
    for declaration in (style or "").split(";"):
        key, sep, value = declaration.partition(":")
        if sep:
            declarations[key.strip().lower()] = value.strip()

    for key in COLOR_STYLE_KEYS:
        if key in declarations:
            try:
                return pv.Color(declarations[key]).float_rgb
            except ValueError:
                logger.warning(f"Unknown colour '{declarations[key]}' in style hint {style!r}.")
                break
    return pv.Color(fallback).float_rgb


class MeshPlotter:
    def __init__(self, plotter: Optional[pv.Plotter] = None, off_screen: bool = False) -> None:
        self.plotter: pv.Plotter = plotter if plotter is not None else pv.Plotter(off_screen=off_screen)
        self._actors: list[pv.Actor] = []
        self._shown: bool = False

    # ------------------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------------------

    @staticmethod
    def node_ids(graph: MeshGraph) -> list[str]:
        """Point order used by `to_polydata`: vertices first, then faces."""
        return [vertex.id for vertex in graph.get_vertices()] + [face.id for face in graph.get_faces()]

    @staticmethod
    def to_polydata(graph: MeshGraph) -> pv.PolyData:
        """
        Convert the graph into a PolyData of points (nodes) and lines (edges).

        Point data:
            node_id: Node ids, in `node_ids` order.
            is_face: 1 for face nodes, 0 for vertices.
            style, ui_class: Display hints of the nodes ("" when unset).
        Cell data:
            edge_id: Edge ids, in graph order.
            border: 1 for border edges, 0 for interior ones.
            style: Display hints of the edges ("" when unset).
        """
        ids = MeshPlotter.node_ids(graph)
        if not ids:
            return pv.PolyData()

        index = {node_id: i for i, node_id in enumerate(ids)}
        nodes = graph.get_vertices() + graph.get_faces()
        points: npt.NDArray[np.float64] = np.array([node.coordinates.to_array() for node in nodes], dtype=np.float64)

        edges = graph.get_edges()
        if edges:
            lines = np.hstack([[2, index[edge.source_id], index[edge.target_id]] for edge in edges])
            pd = pv.PolyData(points, lines=lines)
            pd.cell_data["edge_id"] = np.array([edge.id for edge in edges], dtype=str)
            pd.cell_data["border"] = np.array([int(edge.border) for edge in edges], dtype=np.int8)
            pd.cell_data["style"] = np.array([edge.style or "" for edge in edges], dtype=str)
        else:
            # PolyData adds one vertex cell per point when given no other cells
            pd = pv.PolyData(points)

        pd.point_data["node_id"] = np.array(ids, dtype=str)
        pd.point_data["is_face"] = np.array(
            [0] * len(graph.get_vertices()) + [1] * len(graph.get_faces()), dtype=np.int8
        )
        pd.point_data["style"] = np.array([node.style or "" for node in nodes], dtype=str)
        pd.point_data["ui_class"] = np.array([node.ui_class or "" for node in nodes], dtype=str)
        return pd

    @staticmethod
    def edge_colors(pd: pv.PolyData) -> npt.NDArray[np.float64]:
        """(n_lines, 3) RGB per edge: the style colour, else the border/interior colour."""
        return np.array([
            style_color(str(style), BORDER_EDGE_COLOR if border else INTERIOR_EDGE_COLOR)
            for style, border in zip(pd.cell_data["style"], pd.cell_data["border"])
        ], dtype=np.float64).reshape(-1, 3)

    @staticmethod
    def node_colors(pd: pv.PolyData) -> npt.NDArray[np.float64]:
        """(n_points, 3) RGB per node: the style colour, else the face/vertex colour."""
        return np.array([
            style_color(str(style), FACE_NODE_COLOR if is_face else VERTEX_COLOR)
            for style, is_face in zip(pd.point_data["style"], pd.point_data["is_face"])
        ], dtype=np.float64).reshape(-1, 3)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def show(self, graph: MeshGraph) -> None:
        """Draw the graph and open the window without blocking."""
        logger.info(f"Showing graph '{graph.graph_id}'.")
        self._draw(graph)
        self.plotter.show(interactive_update=True)
        self._shown = True

    def update(self, graph: MeshGraph) -> None:
        """Replace the drawn graph with `graph` and refresh the window."""
        if not self._shown:
            self.show(graph)
            return
        self._draw(graph)
        self.plotter.update()

    def close(self) -> None:
        self.plotter.close()
        self._shown = False

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _clear(self) -> None:
        for actor in self._actors:
            self.plotter.remove_actor(actor, render=False)
        self._actors.clear()

    def _draw(self, graph: MeshGraph) -> None:
        self._clear()
        pd = self.to_polydata(graph)
        if pd.n_points == 0:
            logger.debug(f"Graph '{graph.graph_id}' is empty, nothing to draw.")
            return

        if pd.n_lines > 0:
            self._actors.append(self.plotter.add_mesh(
                pd,
                scalars=self.edge_colors(pd),
                rgb=True,
                line_width=2.0,
                reset_camera=not self._shown,
            ))

        colors = self.node_colors(pd)
        important = pd.point_data["ui_class"] == TRIANGLE_FACE_CLASS
        for mask, size in ((~important, POINT_SIZE), (important, IMPORTANT_POINT_SIZE)):
            if mask.any():
                self._actors.append(self.plotter.add_points(
                    pd.points[mask],
                    scalars=colors[mask],
                    rgb=True,
                    point_size=size,
                    render_points_as_spheres=True,
                    reset_camera=not self._shown,
                ))
