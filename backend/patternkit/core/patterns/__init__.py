"""
Design Patterns Module

This module contains pattern helpers shared across the package.
Currently includes:
- InitOnce: thread-safe once-only construction of a shared instance,
  owned and passed around explicitly instead of living in a global
"""

from .singleton import InitOnce

__all__ = ["InitOnce"]
