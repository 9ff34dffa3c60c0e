"""Player logic for a side-scrolling run-and-gun game: movement, tile collision, damage, bullets and sprite poses."""

__version__ = "0.1.0"
__all__ = ["geometry", "player"]