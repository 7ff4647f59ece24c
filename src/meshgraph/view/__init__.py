from meshgraph.view.animator import Animator
from meshgraph.view.plotter import MeshPlotter

__all__ = ["Animator", "MeshPlotter"]
