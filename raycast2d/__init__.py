"""A top-down 2D ray caster with pixel images, an XPM reader and an event loop."""

__version__ = "0.1.0"
__all__ = ["colornames", "text", "image", "xpm", "events", "scene", "render", "app"]