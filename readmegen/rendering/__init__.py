"""README template rendering."""

from .renderer import DEFAULT_TEMPLATES_DIR, ReadmeRenderer, RenderError

__all__ = ["DEFAULT_TEMPLATES_DIR", "ReadmeRenderer", "RenderError"]
