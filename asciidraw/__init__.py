"""Draw star shapes and bitmap-font characters as ASCII art, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["font_11x16", "font_5x7", "font_8x12", "shapes", "chars", "cli"]