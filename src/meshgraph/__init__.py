"""In-memory triangulated 3D mesh graph with rotation and collinearity queries."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("meshgraph")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
