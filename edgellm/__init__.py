"""HTTP handlers, Flask middleware and a launcher for an LLM inference backend."""

__version__ = "1.0.0"