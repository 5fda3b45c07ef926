"""Matrix row summing with processes and threads, and CPU scheduling simulations."""

__version__ = "0.1.0"

__all__ = ["matrix", "processes", "threads", "scheduling", "demo"]