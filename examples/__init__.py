"""
Example scripts for the curve algebra.

Included examples:
- basic_usage.py: cubic split, slope plots, curve chains

Run with:
    python examples/basic_usage.py
"""

__all__ = []
