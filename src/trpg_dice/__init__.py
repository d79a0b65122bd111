"""TRPG 骰点表达式解析与计算"""
from .dice import (
    roll, count_successes,
    RollResult, SuccessResult, RandomSource,
    DiceError, DiceSyntaxError, DiceDomainError,
)

__all__ = [
    "roll", "count_successes",
    "RollResult", "SuccessResult", "RandomSource",
    "DiceError", "DiceSyntaxError", "DiceDomainError",
]
