"""Public API surface for scc.processing."""
__all__ = [
    "cleaner_registry",
]
