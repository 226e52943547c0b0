# src/fxgraph/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains the adapters between the core and the outside:
- Formatting (fixed-point codec, text output)
"""

__all__ = []
