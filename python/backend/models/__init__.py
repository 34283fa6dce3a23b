from backend.models.board import Board, Color, Tile

__all__ = ["Board", "Color", "Tile"]
