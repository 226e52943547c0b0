# src/fxgraph/__init__.py
"""
fxgraph - Exact Currency Conversion Engine

Converts amounts between a closed set of currencies using exact rational
rates, derives unquoted rates through chains of quoted pairs, and renders
amounts as 8-digit fixed-point decimals.
"""

__version__ = "1.0.0"
