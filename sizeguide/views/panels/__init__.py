"""Drawer panels."""

from .size_guide_drawer import SizeGuideDrawer, scroll_area_lock_applier, trigger_spec_from_widget

__all__ = ["SizeGuideDrawer", "scroll_area_lock_applier", "trigger_spec_from_widget"]
