"""Version information for Sortium.

The version is read from pyproject.toml to maintain a single source of truth.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sortium")
except PackageNotFoundError:
    # Package not installed, fallback for development
    __version__ = "0.0.0-dev"
