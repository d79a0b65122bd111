"""骰点模块"""
from .comparator import Comparator, Condition
from .errors import DiceError, DiceSyntaxError, DiceDomainError
from .parser import (
    DiceParser, DiceExpression, DiceSpec,
    RerollRule, ExplodeRule, KeepDropRule, KeepDropMode,
)
from .roller import DiceRoller, RandomSource, RollResult
from .notation import roll, count_successes, SuccessResult

__all__ = [
    "Comparator", "Condition",
    "DiceError", "DiceSyntaxError", "DiceDomainError",
    "DiceParser", "DiceExpression", "DiceSpec",
    "RerollRule", "ExplodeRule", "KeepDropRule", "KeepDropMode",
    "DiceRoller", "RandomSource", "RollResult",
    "roll", "count_successes", "SuccessResult",
]
