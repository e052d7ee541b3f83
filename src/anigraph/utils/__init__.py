"""Utility helpers for anigraph (logging, persistent configuration)."""
