"""
Mesh Graph (Data Model)
=======================
This module defines the container that owns every vertex, face and edge of a
triangulated mesh.

Why is this file needed?
------------------------
1. Integrity: All structural changes go through MeshGraph, which keeps the
   id -> entity mappings and the adjacency structure in step, and cascades
   removals so that no edge or face ever points at a missing node.
2. Queries: Topological lookups (edge between two nodes) run on a networkx
   MultiGraph, geometric ones (collinear vertices, longest triangle side) on
   the stored coordinates.
3. Isolation: `MeshGraph.clone` rebuilds fresh entities so an animation frame
   can be rotated without touching the canonical mesh.

Classes:
    MeshGraph: The container.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

import networkx as nx

from meshgraph.config import COLLINEARITY_TOLERANCE, FACE_EDGE_STYLE, PLACEHOLDER_FACE_STYLE, TRIANGLE_FACE_CLASS
from meshgraph.model.coordinates import Coordinates
from meshgraph.model.edges import GraphEdge
from meshgraph.model.errors import (
    DuplicateIdError,
    InvalidTriangleError,
    MissingNodeError,
    MissingVertexError,
    NoSuchEdgeError,
    UnknownEdgeError,
)
from meshgraph.model.geometry_utils import inline_determinant, within_xy_bounds
from meshgraph.model.nodes import FaceNode, GraphNode, Vertex

logger = logging.getLogger(__name__)

NodeRef = Union[GraphNode, str]


def _node_id(node: NodeRef) -> str:
    return node if isinstance(node, str) else node.id


class MeshGraph:
    """
    Owns the vertices, faces and edges of one mesh.

    Vertices and faces share a single node namespace; edges have their own.
    Iteration order of every collection is insertion order.
    """

    def __init__(self, graph_id: str) -> None:
        self.graph_id = graph_id
        self._vertices: dict[str, Vertex] = {}
        self._faces: dict[str, FaceNode] = {}
        self._edges: dict[str, GraphEdge] = {}
        self._adjacency = nx.MultiGraph()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self.graph_id!r}, vertices={len(self._vertices)}, "
            f"faces={len(self._faces)}, edges={len(self._edges)})"
        )

    def __len__(self) -> int:
        return len(self._vertices) + len(self._faces)

    def __contains__(self, node: NodeRef) -> bool:
        return self._adjacency.has_node(_node_id(node))

    @classmethod
    def clone(cls, graph: MeshGraph, graph_id: Optional[str] = None) -> MeshGraph:
        """
        Deep-copy a graph into a new, independent container.

        Faces are copied without re-creating their triangle edges and edges keep
        their cached length, so the copy matches the source exactly even when
        the source was rotated after its edges were built.
        """
        copy = cls(graph_id if graph_id is not None else f"{graph.graph_id}1")
        for vertex in graph._vertices.values():
            copy._register_node(Vertex(vertex.id, vertex.coordinates, style=vertex.style, ui_class=vertex.ui_class))
        for face in graph._faces.values():
            copy._register_node(
                FaceNode(face.id, face.coordinates, triangle=face.triangle, style=face.style, ui_class=face.ui_class)
            )
        for edge in graph._edges.values():
            copy._register_edge(edge.copy())
        logger.debug(f"Cloned graph '{graph.graph_id}' into '{copy.graph_id}'.")
        return copy

    # ------------------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------------------

    def insert_vertex(self, vertex_id: str, coordinates: Coordinates) -> Vertex:
        """
        Create and register a vertex.

        Raises:
            DuplicateIdError: If a vertex or face already uses `vertex_id`.
        """
        self._check_free_node_id(vertex_id)
        vertex = Vertex(vertex_id, coordinates)
        self._register_node(vertex)
        logger.debug(f"Inserted vertex '{vertex_id}' at {coordinates}.")
        return vertex

    def remove_vertex(self, vertex_id: str) -> Optional[Vertex]:
        """
        Remove a vertex together with every face and edge that references it.

        Returns:
            The removed vertex, or None if no such vertex was registered.
        """
        vertex = self._vertices.pop(vertex_id, None)
        if vertex is None:
            return None

        for face_id in [face.id for face in self._faces.values() if face.references(vertex_id)]:
            self.remove_face(face_id)
        for edge_id in [edge.id for edge in self._edges.values() if edge.connects(vertex_id)]:
            self.delete_edge(edge_id)

        self._adjacency.remove_node(vertex_id)
        logger.debug(f"Removed vertex '{vertex_id}'.")
        return vertex

    def insert_face(
        self,
        face_id: str,
        *vertices: NodeRef,
        coordinates: Optional[Coordinates] = None,
    ) -> FaceNode:
        """
        Register a face.

        Called with three vertices (instances or ids), builds a triangle face and
        its three face-to-vertex edges named `face_id + vertex_id`. Called with
        coordinates only, registers a placeholder face without edges. Either way
        the graph is left untouched if anything fails.

        Raises:
            DuplicateIdError: If the face id or one of the derived edge ids is taken.
            MissingVertexError: If a triangle vertex is not registered.
            InvalidTriangleError: If the vertices are not exactly three distinct ones.
        """
        self._check_free_node_id(face_id)

        if not vertices:
            if coordinates is None:
                raise ValueError(f"Placeholder face '{face_id}' needs explicit coordinates.")
            face = FaceNode(face_id, coordinates, style=PLACEHOLDER_FACE_STYLE)
            self._register_node(face)
            logger.debug(f"Inserted placeholder face '{face_id}' at {coordinates}.")
            return face

        if len(vertices) != 3:
            logger.warning(f"Rejected face '{face_id}' built from {len(vertices)} vertices.")
            raise InvalidTriangleError(f"Face '{face_id}' needs exactly 3 vertices, got {len(vertices)}.")

        v1, v2, v3 = (self._resolve_vertex(vertex) for vertex in vertices)
        face = FaceNode.from_vertices(face_id, v1, v2, v3, coordinates=coordinates, ui_class=TRIANGLE_FACE_CLASS)

        edge_ids = [face_id + vertex.id for vertex in (v1, v2, v3)]
        for edge_id in edge_ids:
            self._check_free_edge_id(edge_id)

        self._register_node(face)
        for edge_id, vertex in zip(edge_ids, (v1, v2, v3)):
            self._register_edge(GraphEdge.between(edge_id, face, vertex, border=False, style=FACE_EDGE_STYLE))
        logger.debug(f"Inserted face '{face_id}' on triangle {face.triangle}.")
        return face

    def remove_face(self, face_id: str) -> Optional[FaceNode]:
        """
        Remove a face and every edge that references it.

        Returns:
            The removed face, or None if no such face was registered.
        """
        if face_id not in self._faces:
            return None

        for edge_id in [edge.id for edge in self._edges.values() if edge.connects(face_id)]:
            self.delete_edge(edge_id)
        face = self._faces.pop(face_id)
        self._adjacency.remove_node(face_id)
        logger.debug(f"Removed face '{face_id}'.")
        return face

    # ------------------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------------------

    def insert_edge(
        self,
        edge_id: str,
        n1: NodeRef,
        n2: NodeRef,
        border: bool = False,
        style: Optional[str] = None,
    ) -> GraphEdge:
        """
        Connect two registered nodes.

        Raises:
            DuplicateIdError: If `edge_id` is taken.
            MissingNodeError: If either endpoint is not registered.
            InvalidEdgeError: If both endpoints are the same node.
        """
        self._check_free_edge_id(edge_id)
        first = self._resolve_node(n1)
        second = self._resolve_node(n2)
        edge = GraphEdge.between(edge_id, first, second, border=border, style=style)
        self._register_edge(edge)
        logger.debug(f"Inserted edge '{edge_id}' between '{first.id}' and '{second.id}'.")
        return edge

    def delete_edge(self, edge_id: str) -> Optional[GraphEdge]:
        """Remove an edge by id. Returns None if it was not registered."""
        edge = self._edges.pop(edge_id, None)
        if edge is None:
            return None
        self._adjacency.remove_edge(edge.source_id, edge.target_id, key=edge_id)
        logger.debug(f"Deleted edge '{edge_id}'.")
        return edge

    def delete_edge_between(self, n1: NodeRef, n2: NodeRef) -> GraphEdge:
        """
        Remove the edge that connects two nodes.

        Raises:
            NoSuchEdgeError: If the nodes are not connected.
        """
        edge = self.get_edge_between_nodes(n1, n2)
        if edge is None:
            logger.warning(f"No edge to delete between '{_node_id(n1)}' and '{_node_id(n2)}'.")
            raise NoSuchEdgeError(_node_id(n1), _node_id(n2))
        return self.delete_edge(edge.id)

    def get_edge_between_nodes(self, n1: NodeRef, n2: NodeRef) -> Optional[GraphEdge]:
        """First edge (in insertion order) connecting two nodes, in either direction."""
        connecting = self._adjacency.get_edge_data(_node_id(n1), _node_id(n2))
        if not connecting:
            return None
        return self._edges[next(iter(connecting))]

    def get_edge(self, n1: NodeRef, n2: NodeRef) -> Optional[GraphEdge]:
        return self.get_edge_between_nodes(n1, n2)

    # ------------------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------------------

    def get_vertex(self, vertex_id: str) -> Optional[Vertex]:
        return self._vertices.get(vertex_id)

    def get_vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    def get_face(self, face_id: str) -> Optional[FaceNode]:
        return self._faces.get(face_id)

    def get_faces(self) -> list[FaceNode]:
        return list(self._faces.values())

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self._vertices.get(node_id) or self._faces.get(node_id)

    def get_edge_by_id(self, edge_id: str) -> Optional[GraphEdge]:
        return self._edges.get(edge_id)

    def get_edges(self) -> list[GraphEdge]:
        return list(self._edges.values())

    def get_triangle(self, face: Union[FaceNode, str]) -> tuple[Vertex, Vertex, Vertex]:
        """
        Resolve the triangle of a face into vertex instances.

        Raises:
            MissingNodeError: If the face is not registered.
            InvalidTriangleError: If the face is a placeholder without a triangle.
        """
        face_id = _node_id(face)
        registered = self._faces.get(face_id)
        if registered is None:
            raise MissingNodeError(face_id)
        if registered.triangle is None:
            raise InvalidTriangleError(f"Face '{face_id}' has no triangle.")
        v1, v2, v3 = (self._vertices[vertex_id] for vertex_id in registered.triangle)
        return v1, v2, v3

    # ------------------------------------------------------------------------------
    # Geometric queries
    # ------------------------------------------------------------------------------

    def get_vertices_between(self, beginning: Vertex, end: Vertex) -> list[Vertex]:
        """
        Registered vertices lying strictly between `beginning` and `end`.

        A vertex qualifies when it differs from both endpoints, falls inside
        their XY bounding rectangle, and the determinant of the three position
        vectors is within COLLINEARITY_TOLERANCE of zero. Directly connected
        endpoints short-circuit to an empty list.
        """
        if self.get_edge_between_nodes(beginning, end) is not None:
            return []
        return [vertex for vertex in self._vertices.values() if self._is_vertex_between(vertex, beginning, end)]

    def get_vertex_between(self, beginning: Vertex, end: Vertex) -> Optional[Vertex]:
        """First vertex between `beginning` and `end`, in vertex insertion order."""
        return next(iter(self.get_vertices_between(beginning, end)), None)

    def get_triangle_longest_edge(self, face: Union[FaceNode, str]) -> GraphEdge:
        """
        Longest of the three triangle sides of a face.

        Sides are checked as (v1, v2), (v2, v3), (v1, v3); on equal lengths the
        first one checked wins.

        Raises:
            UnknownEdgeError: If a side has no edge registered.
        """
        v1, v2, v3 = self.get_triangle(face)
        sides = []
        for first, second in ((v1, v2), (v2, v3), (v1, v3)):
            edge = self.get_edge_between_nodes(first, second)
            if edge is None:
                logger.warning(f"Face '{_node_id(face)}' has no edge between '{first.id}' and '{second.id}'.")
                raise UnknownEdgeError(first.id, second.id)
            sides.append(edge)
        return max(sides, key=lambda edge: edge.length)

    # ------------------------------------------------------------------------------
    # Bulk transforms
    # ------------------------------------------------------------------------------

    def rotate(
        self,
        pitch: Optional[float] = None,
        yaw: Optional[float] = None,
        roll: Optional[float] = None,
    ) -> None:
        """
        Rotate every face and vertex in place.

        Without arguments each node applies the default increment. Cached edge
        lengths are left as they are.
        """
        for node in self._iter_nodes():
            node.rotate(pitch, yaw, roll)

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _iter_nodes(self) -> Iterable[GraphNode]:
        yield from self._faces.values()
        yield from self._vertices.values()

    def _check_free_node_id(self, node_id: str) -> None:
        if node_id in self._vertices or node_id in self._faces:
            logger.warning(f"Rejected duplicate node id '{node_id}' in graph '{self.graph_id}'.")
            raise DuplicateIdError(node_id, kind="node")

    def _check_free_edge_id(self, edge_id: str) -> None:
        if edge_id in self._edges:
            logger.warning(f"Rejected duplicate edge id '{edge_id}' in graph '{self.graph_id}'.")
            raise DuplicateIdError(edge_id, kind="edge")

    def _resolve_node(self, node: NodeRef) -> GraphNode:
        node_id = _node_id(node)
        registered = self.get_node(node_id)
        if registered is None:
            logger.warning(f"Unknown node '{node_id}' in graph '{self.graph_id}'.")
            raise MissingNodeError(node_id)
        return registered

    def _resolve_vertex(self, vertex: NodeRef) -> Vertex:
        vertex_id = _node_id(vertex)
        registered = self._vertices.get(vertex_id)
        if registered is None:
            logger.warning(f"Unknown vertex '{vertex_id}' in graph '{self.graph_id}'.")
            raise MissingVertexError(vertex_id)
        return registered

    def _register_node(self, node: GraphNode) -> None:
        if isinstance(node, FaceNode):
            self._faces[node.id] = node
        else:
            self._vertices[node.id] = node
        self._adjacency.add_node(node.id)

    def _register_edge(self, edge: GraphEdge) -> None:
        self._edges[edge.id] = edge
        self._adjacency.add_edge(edge.source_id, edge.target_id, key=edge.id)

    @staticmethod
    def _is_vertex_between(vertex: Vertex, beginning: Vertex, end: Vertex) -> bool:
        if vertex.coordinates == beginning.coordinates or vertex.coordinates == end.coordinates:
            return False
        return (
            within_xy_bounds(vertex.coordinates, beginning.coordinates, end.coordinates)
            and abs(inline_determinant(vertex.coordinates, beginning.coordinates, end.coordinates))
            < COLLINEARITY_TOLERANCE
        )
