"""Core business logic layer.

Subpackages:
- shopping: ingredient normalization, price lookup, bulk savings and shopping lists
"""
__all__ = ["shopping"]
