"""Conference information and registration backend."""

__version__ = "1.0.0"
