"""Contract and shorten working-directory paths for shell prompts."""

__version__ = "0.33.0"
__all__ = ["directory"]