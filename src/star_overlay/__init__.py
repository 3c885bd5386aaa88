"""star-overlay: label layout for star system map overlays."""

__version__ = "0.1.0"
