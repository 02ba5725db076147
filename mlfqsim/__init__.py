"""Multi-level feedback queue CPU scheduling simulator."""

__version__ = "0.1.0"
__all__ = ["models", "strategies", "scheduler", "report", "cli"]