"""Storefront/admin GUI layer.

Holds the session-scoped theme runtime context, the style injection targets
and the views that consume theme colors. Modules avoid hard dependencies on
a display server so they can be imported in headless test runs.
"""
