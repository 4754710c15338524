"""Command-driven asyncio TCP subsystem that keeps in-memory status windows opened on request."""

__version__ = "1.0.0"
__all__ = ["__version__"]