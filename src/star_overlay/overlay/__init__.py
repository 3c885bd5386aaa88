"""Overlay session state: markers, coordinate mapping and fades."""

from star_overlay.overlay.fade import FadeAnimation
from star_overlay.overlay.mapper import CoordinateMapper
from star_overlay.overlay.markers import Marker, MarkerRegistry, PointMarker
from star_overlay.overlay.session import ObjectView, OverlaySession

__all__ = [
    "CoordinateMapper",
    "FadeAnimation",
    "Marker",
    "MarkerRegistry",
    "ObjectView",
    "OverlaySession",
    "PointMarker",
]
