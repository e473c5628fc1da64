"""Logging helpers for scc."""
