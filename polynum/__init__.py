"""Polymorphic number types with mixed arithmetic and comparison, and a demonstration."""

__version__ = "0.1.0"
__all__ = ["numeric", "demo"]