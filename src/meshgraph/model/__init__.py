"""
The MODEL layer contains pure data structures and algorithms.
It has NO knowledge of the Visualization (PyVista).
It deals with the mesh graph, its geometry and its rotation frames.
"""
from meshgraph.model.animation import rotation_frames
from meshgraph.model.coordinates import Coordinates
from meshgraph.model.edges import GraphEdge
from meshgraph.model.errors import (
    DuplicateIdError,
    InvalidEdgeError,
    InvalidTriangleError,
    MeshGraphError,
    MissingNodeError,
    MissingVertexError,
    NoSuchEdgeError,
    UnknownEdgeError,
)
from meshgraph.model.graph import MeshGraph
from meshgraph.model.nodes import FaceNode, GraphNode, Vertex

__all__ = [
    "Coordinates",
    "DuplicateIdError",
    "FaceNode",
    "GraphEdge",
    "GraphNode",
    "InvalidEdgeError",
    "InvalidTriangleError",
    "MeshGraph",
    "MeshGraphError",
    "MissingNodeError",
    "MissingVertexError",
    "NoSuchEdgeError",
    "UnknownEdgeError",
    "Vertex",
    "rotation_frames",
]
