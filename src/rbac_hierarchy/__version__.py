"""Version information for rbac-hierarchy."""

__version__ = "0.3.0"
