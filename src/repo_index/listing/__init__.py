"""Prefix listing and index rendering."""

from .index import Entry, immediate_children, render_index
from .lister import KeyLister

__all__ = ["Entry", "KeyLister", "immediate_children", "render_index"]
