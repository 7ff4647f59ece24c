"""
Mesh Graph Errors
=================
Caller-facing failures raised when an operation would break the referential
consistency of a MeshGraph. None of them are transient; they signal a contract
violation at the call site.

Each error also derives from the closest builtin so that existing
``except KeyError`` / ``except ValueError`` handlers keep working.
"""
from __future__ import annotations


class MeshGraphError(Exception):
    """Base class for all mesh graph errors."""


class DuplicateIdError(MeshGraphError, KeyError):
    """An entity with the same id is already registered."""

    def __init__(self, entity_id: str, kind: str = "node") -> None:
        self.entity_id = entity_id
        self.kind = kind
        super().__init__(f"A {kind} with id '{entity_id}' is already registered.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class MissingNodeError(MeshGraphError, KeyError):
    """An edge or face refers to a node id that is not registered."""

    kind = "node"

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"No {self.kind} with id '{node_id}' is registered.")

    def __str__(self) -> str:
        return self.args[0]


class MissingVertexError(MissingNodeError):
    """A triangle refers to a vertex id that is not registered."""

    kind = "vertex"


class InvalidTriangleError(MeshGraphError, ValueError):
    """A face triangle does not consist of exactly three distinct vertices."""


class InvalidEdgeError(MeshGraphError, ValueError):
    """An edge would connect a node to itself."""


class NoSuchEdgeError(MeshGraphError, LookupError):
    """No edge connects the two given nodes."""

    def __init__(self, first_id: str, second_id: str) -> None:
        self.node_ids = (first_id, second_id)
        super().__init__(f"No edge connects '{first_id}' and '{second_id}'.")


class UnknownEdgeError(MeshGraphError, LookupError):
    """A triangle side expected to carry an edge has none."""

    def __init__(self, first_id: str, second_id: str) -> None:
        self.node_ids = (first_id, second_id)
        super().__init__(
            f"Unknown edge between triangle vertices '{first_id}' and '{second_id}'. "
            "Triangle sides must be inserted as edges before querying the longest edge."
        )
