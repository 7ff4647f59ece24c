import pytest

from meshgraph.model import Coordinates, MeshGraph


@pytest.fixture
def empty_graph() -> MeshGraph:
    return MeshGraph("mesh")


@pytest.fixture
def right_triangle_graph() -> MeshGraph:
    """
    A(0,0,0), B(10,0,0), C(0,10,0) with all three sides as edges and face F.
    """
    graph = MeshGraph("mesh")
    a = graph.insert_vertex("A", Coordinates(0.0, 0.0, 0.0))
    b = graph.insert_vertex("B", Coordinates(10.0, 0.0, 0.0))
    c = graph.insert_vertex("C", Coordinates(0.0, 10.0, 0.0))
    graph.insert_edge("AB", a, b, border=True)
    graph.insert_edge("BC", b, c, border=True)
    graph.insert_edge("AC", a, c, border=True)
    graph.insert_face("F", a, b, c)
    return graph


@pytest.fixture
def square_graph() -> MeshGraph:
    """
    Unit square split along B-C into two triangles, with 3D offsets so the
    collinearity determinant is not trivially zero.
    """
    graph = MeshGraph("square")
    a = graph.insert_vertex("A", Coordinates(0.0, 0.0, 1.0))
    b = graph.insert_vertex("B", Coordinates(1.0, 0.0, 1.0))
    c = graph.insert_vertex("C", Coordinates(0.0, 1.0, 1.0))
    d = graph.insert_vertex("D", Coordinates(1.0, 1.0, 1.0))
    for edge_id, n1, n2, border in (
        ("AB", a, b, True),
        ("AC", a, c, True),
        ("BD", b, d, True),
        ("CD", c, d, True),
        ("BC", b, c, False),
    ):
        graph.insert_edge(edge_id, n1, n2, border=border)
    graph.insert_face("F1", a, b, c)
    graph.insert_face("F2", b, d, c)
    return graph
