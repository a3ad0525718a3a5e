"""Domain models."""

from lotto_board.models.draw import DrawRecord

__all__ = ["DrawRecord"]
