"""Command-line helper that streamlines common Git operations."""

__version__ = "1.0.2"
__all__ = ["__version__"]