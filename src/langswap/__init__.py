"""Runtime translation registry with hot-reloadable language resources."""

__version__ = "1.0.0"
