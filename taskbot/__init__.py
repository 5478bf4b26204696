"""Chat Task Bot - webhook-driven per-user task lists for chat."""

__version__ = "1.0.0"
