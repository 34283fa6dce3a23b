from backend.engine.gamegenerator.generator import GameGenerator
from backend.engine.gamegenerator.permutation import shuffled

__all__ = ["GameGenerator", "shuffled"]
