"""骰点入口: 复合表达式掷骰与成功计数"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..logging.handlers import log_roll
from .comparator import Condition
from .parser import DiceParser
from .roller import DiceRoller, RandomSource, RollResult


@dataclass
class SuccessResult:
    """成功计数结果"""

    notation: str
    rolls: List[int] = field(default_factory=list)
    success_count: int = 0
    condition: Optional[Condition] = None

    def __str__(self) -> str:
        rolls_str = ", ".join(map(str, self.rolls))
        cond = f" ({self.condition})" if self.condition else ""
        return f"{self.notation}{cond} = [{rolls_str}] → 成功 {self.success_count}"


def split_expressions(notation: str) -> List[str]:
    """按逗号拆分复合表达式并去除空白"""
    return [part.strip() for part in notation.split(",")]


@log_roll
def roll(notation: str, source: Optional[RandomSource] = None) -> List[RollResult]:
    """掷骰，支持逗号分隔的复合表达式，如 "1d6, 2d10+5"

    按从左到右顺序依次解析并掷骰，任一子表达式出错即中止。

    Raises:
        DiceError: 任一子表达式无效
    """
    roller = DiceRoller(source)
    return [roller.roll(DiceParser.parse(expr)) for expr in split_expressions(notation)]


@log_roll
def count_successes(
    notation: str, condition: str, source: Optional[RandomSource] = None
) -> List[SuccessResult]:
    """掷骰并统计满足条件的骰子数，如 count_successes("10d6", ">=5")

    Raises:
        DiceSyntaxError: 成功条件格式无效
        DiceError: 任一子表达式无效
    """
    cond = Condition.parse(condition)
    roller = DiceRoller(source)

    results: List[SuccessResult] = []
    for expr in split_expressions(notation):
        result = roller.roll(DiceParser.parse(expr))
        results.append(
            SuccessResult(
                notation=result.notation,
                rolls=result.rolls,
                success_count=sum(1 for value in result.rolls if cond.matches(value)),
                condition=cond,
            )
        )
    return results
