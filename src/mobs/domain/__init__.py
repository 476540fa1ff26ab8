"""MOBS bounded contexts."""
