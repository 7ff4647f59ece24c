from __future__ import annotations

from typing import Optional

from meshgraph.model.errors import InvalidEdgeError
from meshgraph.model.nodes import GraphNode


class GraphEdge:
    """
    A named connection between two nodes of a mesh graph.

    The length is measured once, when the edge is built, and is kept as-is when
    the endpoints are rotated later on.
    """

    def __init__(
        self,
        edge_id: str,
        source_id: str,
        target_id: str,
        length: float,
        border: bool = False,
        style: Optional[str] = None,
    ) -> None:
        """
        Initialize the edge from already resolved endpoint ids.

        Args:
            edge_id: Identifier, unique within the owning graph.
            source_id: Id of the first endpoint.
            target_id: Id of the second endpoint.
            length: Cached endpoint distance.
            border: Whether the edge lies on the mesh boundary (caller policy).
            style: Opaque style hint forwarded to the viewer.
        """
        if source_id == target_id:
            raise InvalidEdgeError(f"Edge '{edge_id}' cannot connect node '{source_id}' to itself.")
        self.id = edge_id
        self.source_id = source_id
        self.target_id = target_id
        self.length = length
        self.border = border
        self.style = style

    @classmethod
    def between(
        cls,
        edge_id: str,
        n1: GraphNode,
        n2: GraphNode,
        border: bool = False,
        style: Optional[str] = None,
    ) -> GraphEdge:
        """Build an edge between two nodes, measuring its length from their current positions."""
        return cls(
            edge_id,
            n1.id,
            n2.id,
            length=n1.coordinates.distance_to(n2.coordinates),
            border=border,
            style=style,
        )

    def __repr__(self) -> str:
        """String representation of the edge."""
        return (
            f"{self.__class__.__name__}(id={self.id!r}, nodes=({self.source_id!r}, {self.target_id!r}), "
            f"length={self.length:.6g}, border={self.border})"
        )

    def get_edge_nodes(self) -> tuple[str, str]:
        return self.source_id, self.target_id

    def connects(self, node_id: str) -> bool:
        return node_id == self.source_id or node_id == self.target_id

    def copy(self) -> GraphEdge:
        return GraphEdge(
            self.id,
            self.source_id,
            self.target_id,
            length=self.length,
            border=self.border,
            style=self.style,
        )
