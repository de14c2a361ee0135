"""Backend Forge -- scaffolds Node/Express backend projects."""

__version__ = "0.1.0"
