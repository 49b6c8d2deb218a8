"""Texas hold'em table logic: cards, dealing, buttons, seating and game state."""

__version__ = "0.1.0"
__all__ = ["button", "cards", "game", "table"]