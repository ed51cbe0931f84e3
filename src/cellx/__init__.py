"""cellx: a thread-safe observable value for Python."""

from importlib.metadata import version as _version

__version__ = _version("cellx")

from cellx.cell import Cell, Listener
from cellx.isolated import IsolatedCell

__all__ = [
    "Cell",
    "IsolatedCell",
    "Listener",
]
