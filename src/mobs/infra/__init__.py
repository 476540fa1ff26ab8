"""MOBS infrastructure adapters."""
