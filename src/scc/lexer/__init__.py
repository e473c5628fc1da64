"""Character-level scanning engine: cursor, sub-scanners and the comment state machine."""
__all__ = [
    "context",
    "cursor",
    "diagnostics",
    "emitter",
    "features",
    "identifiers",
    "literals",
    "machine",
    "numbers",
    "splices",
]
