"""Status line generator for i3bar: network throughput and clock blocks."""

__version__ = "0.1.0"
__all__ = ["bar", "blocks", "clock", "network"]