"""Geometry kernel for multi-line military plotting symbols."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("plottingsymbols")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
