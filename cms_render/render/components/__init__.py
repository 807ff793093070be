"""Built-in component renderers, registered on import."""

from . import action, dynamic, interactive, layout, media, section, text  # noqa: F401
