"""A terminal text adventure about rescuing the lost chicks of a park."""

__version__ = "0.1.0"
__all__ = ["__version__"]