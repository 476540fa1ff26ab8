"""MOBS Foundation -- shared domain building blocks."""
