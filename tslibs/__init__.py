"""Thread-safe stack and queue containers, with a threaded demo."""

__version__ = "0.1.0"
__all__ = ["tsstack", "tsqueue", "demo"]