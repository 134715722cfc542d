from puzzlegen.star_battle.generator import StarBattleGenerator, StarBattlePuzzle
from puzzlegen.star_battle.placer import StarsPlacer
from puzzlegen.star_battle.regions import RegionGrower
from puzzlegen.star_battle.verifier import StarBattleVerifier, VerificationReport

__all__ = [
    'RegionGrower',
    'StarBattleGenerator',
    'StarBattlePuzzle',
    'StarBattleVerifier',
    'StarsPlacer',
    'VerificationReport',
]
