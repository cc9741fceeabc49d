"""Trigger discovery and drawer instantiation."""

from .drawer_registry import DrawerRegistry, init_size_guide_drawers

__all__ = ["DrawerRegistry", "init_size_guide_drawers"]
