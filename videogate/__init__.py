"""Gateway for third-party video generation and LLM APIs."""

__version__ = "1.0.0"
