"""Screens of the application."""

from markermap.views.marker_detail import MarkerDetailView
from markermap.views.marker_list import MarkerListView

__all__ = [
    "MarkerDetailView",
    "MarkerListView",
]
