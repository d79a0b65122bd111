"""骰点执行器"""
import math
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..logging import get_logger
from .parser import DiceExpression, KeepDropMode, KeepDropRule

logger = get_logger("roller")


class RandomSource:
    """随机数来源

    将 [0, 1) 的均匀随机数映射到 [1, sides]。
    测试时可传入固定序列，如 RandomSource(iter([0.9, 0.1]).__next__)。
    """

    def __init__(self, uniform: Optional[Callable[[], float]] = None):
        self._uniform = uniform or random.random

    def roll(self, sides: int) -> int:
        """掷一颗 sides 面骰"""
        return math.floor(self._uniform() * sides) + 1


@dataclass
class RollResult:
    """骰点结果"""

    notation: str  # 原始表达式
    rolls: List[int] = field(default_factory=list)  # 重骰/爆骰/保留丢弃之后的骰点
    total: int = 0

    def __str__(self) -> str:
        modifier = self.total - sum(self.rolls)
        # 单颗骰且无修正
        if len(self.rolls) == 1 and modifier == 0:
            return f"{self.notation} = {self.total}"

        rolls_str = "+".join(map(str, self.rolls))
        mod_str = f"({modifier:+d})" if modifier else ""
        return f"{self.notation} = [{rolls_str}]{mod_str} = {self.total}"


class DiceRoller:
    """骰点执行器"""

    def __init__(self, source: Optional[RandomSource] = None):
        self._source = source or RandomSource()

    def roll_pool(self, expr: DiceExpression) -> List[int]:
        """逐颗掷骰，处理重骰与爆骰，返回按生成顺序排列的骰池"""
        sides = expr.sides
        reroll = expr.reroll
        explode = expr.explode
        pool: List[int] = []

        # 重骰次数在整个表达式内共享
        rerolls_remaining = reroll.limit if reroll else 0

        for _ in range(expr.count):
            current = self._source.roll(sides)
            if reroll and reroll.condition.matches(current) and rerolls_remaining > 0:
                current = self._source.roll(sides)  # 只重骰一次
                rerolls_remaining -= 1
            pool.append(current)

            if explode:
                # 爆骰次数每颗骰子独立计算
                explosions_remaining = explode.limit
                while explode.condition.matches(current) and explosions_remaining > 0:
                    current = self._source.roll(sides)
                    pool.append(current)
                    explosions_remaining -= 1

        return pool

    @staticmethod
    def select(pool: List[int], rule: Optional[KeepDropRule]) -> List[int]:
        """按保留/丢弃规则选取骰子；无规则时保持原顺序"""
        if rule is None:
            return list(pool)

        ordered = sorted(pool)
        count = len(ordered)
        if rule.mode is KeepDropMode.DROP_LOW:
            return ordered[rule.count:]
        if rule.mode is KeepDropMode.DROP_HIGH:
            return ordered[:count - rule.count]
        if rule.mode is KeepDropMode.KEEP_LOW:
            return ordered[:rule.count]
        return ordered[count - rule.count:]

    def roll(self, expr: DiceExpression) -> RollResult:
        """执行骰点"""
        pool = self.roll_pool(expr)
        rolls = self.select(pool, expr.keep_drop)
        total = sum(rolls) + expr.modifier
        logger.debug(f"ROLL_POOL | expr={expr.raw} | pool={pool} | kept={rolls} | total={total}")
        return RollResult(notation=expr.raw, rolls=rolls, total=total)
