"""Describe staged git changes with an LLM."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("describe")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
