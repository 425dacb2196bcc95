"""Feature modules for rbac-hierarchy."""
