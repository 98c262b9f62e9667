"""
Core numeric primitives, domain value objects, and contracts.

This package is independent of any application layer (menus, parsing,
persistence): callers consume it programmatically.
"""
