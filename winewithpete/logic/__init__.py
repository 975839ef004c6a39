"""Core business logic layer.

Subpackages:
- shopping: serving-size scaling and shopping list aggregation
- access: membership tier checks for packages
- metadata: Open Graph link previews
- members: subscription tier changes
"""
__all__ = ["shopping", "access", "metadata", "members"]
