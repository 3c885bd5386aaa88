"""Star system definition parser."""

from star_overlay.parser.system import parse_system

__all__ = ["parse_system"]
