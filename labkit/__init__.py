"""Small teaching exercises: household device models, sample statistics and train sorting."""

__version__ = "0.1.0"
__all__ = ["containers", "devices", "household", "stats", "train"]