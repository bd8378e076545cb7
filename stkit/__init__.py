"""Terminal emulator helpers: glyph geometry, colours, farbfeld images, URLs, drops and key tables."""

__version__ = "0.9.3"