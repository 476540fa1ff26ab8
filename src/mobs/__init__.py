"""MOBS -- Multi-tenant Object Storage control plane."""

__version__ = "0.1.0"
