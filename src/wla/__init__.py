"""wla: run ``wls`` with long listing and hidden entries enabled."""

__all__ = ["__version__"]

__version__ = "0.1.0"
