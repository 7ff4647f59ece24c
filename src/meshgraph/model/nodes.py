from __future__ import annotations

from abc import ABC
from typing import Optional

from meshgraph.model.coordinates import Coordinates
from meshgraph.model.errors import InvalidTriangleError


class GraphNode(ABC):
    """
    A positioned, rotatable and identified entity of a mesh graph.

    Nodes never touch graph-wide state; the owning MeshGraph registers them,
    wires their edges and removes them.
    """
    symbol: str = ""

    def __init__(
        self,
        node_id: str,
        coordinates: Coordinates,
        style: Optional[str] = None,
        ui_class: Optional[str] = None,
    ) -> None:
        """
        Initialize the node.

        Args:
            node_id: Identifier, unique within the owning graph.
            coordinates: Position of the node.
            style: Opaque style hint forwarded to the viewer.
            ui_class: Opaque class label forwarded to the viewer.
        """
        self.id = node_id
        self.coordinates = coordinates
        self.style = style
        self.ui_class = ui_class

    def __repr__(self) -> str:
        """String representation of the node."""
        return f"{self.__class__.__name__}(id={self.id!r}, coordinates={self.coordinates})"

    @property
    def x(self) -> float:
        """X-coordinate of the node."""
        return self.coordinates.x

    @property
    def y(self) -> float:
        """Y-coordinate of the node."""
        return self.coordinates.y

    @property
    def z(self) -> float:
        """Z-coordinate of the node."""
        return self.coordinates.z

    def rotate(
        self,
        pitch: Optional[float] = None,
        yaw: Optional[float] = None,
        roll: Optional[float] = None,
    ) -> None:
        """
        Replace the stored coordinates with rotated ones.

        Without arguments the default increment is applied, otherwise missing
        angles count as zero. Edges and faces that cached values derived from
        this node are not updated.
        """
        if pitch is None and yaw is None and roll is None:
            self.coordinates = self.coordinates.get_rotation()
        else:
            self.coordinates = self.coordinates.rotate(pitch or 0.0, yaw or 0.0, roll or 0.0)


class Vertex(GraphNode):
    """A named point of the mesh."""
    symbol = "V"


class FaceNode(GraphNode):
    """
    A face of the mesh.

    A triangle face references its three vertices by id; a placeholder face
    has no triangle at all. The face position is independent of its vertices
    once constructed.
    """
    symbol = "F"

    def __init__(
        self,
        node_id: str,
        coordinates: Coordinates,
        triangle: Optional[tuple[str, str, str]] = None,
        style: Optional[str] = None,
        ui_class: Optional[str] = None,
    ) -> None:
        super().__init__(node_id, coordinates, style=style, ui_class=ui_class)
        if triangle is not None:
            triangle = tuple(triangle)
            if len(triangle) != 3 or len(set(triangle)) != 3:
                raise InvalidTriangleError(
                    f"Face '{node_id}' needs exactly 3 distinct vertices, got {list(triangle)}."
                )
        self.triangle: Optional[tuple[str, str, str]] = triangle

    @classmethod
    def from_vertices(
        cls,
        node_id: str,
        v1: Vertex,
        v2: Vertex,
        v3: Vertex,
        coordinates: Optional[Coordinates] = None,
        **hints: Optional[str],
    ) -> FaceNode:
        """
        Build a triangle face. Without explicit coordinates the face sits at
        the centroid of its vertices as they are right now.
        """
        if coordinates is None:
            coordinates = Coordinates(
                (v1.x + v2.x + v3.x) / 3,
                (v1.y + v2.y + v3.y) / 3,
                (v1.z + v2.z + v3.z) / 3,
            )
        return cls(node_id, coordinates, triangle=(v1.id, v2.id, v3.id), **hints)

    @property
    def is_triangle(self) -> bool:
        return self.triangle is not None

    def references(self, vertex_id: str) -> bool:
        return self.triangle is not None and vertex_id in self.triangle
