"""骰点表达式解析器

语法（不区分大小写），子句顺序固定，除骰子项外均可省略:
    XdY [r<cmp>N[Ln]] [!<cmp>[N][Ln]] [kh|kl|dh|dl N] [+|-M]
例如 4d6r<2!>5kh3+5
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import settings
from ..logging import get_logger
from .comparator import COMPARATOR_PATTERN, Comparator, Condition
from .errors import DiceDomainError, DiceError, DiceSyntaxError

EXAMPLE_NOTATION = "4d6r<2!>5kh3+5"

logger = get_logger("parser")


class KeepDropMode(Enum):
    """保留/丢弃方式"""
    KEEP_HIGH = "kh"
    KEEP_LOW = "kl"
    DROP_HIGH = "dh"
    DROP_LOW = "dl"

    @property
    def is_keep(self) -> bool:
        return self in (KeepDropMode.KEEP_HIGH, KeepDropMode.KEEP_LOW)


@dataclass(frozen=True)
class DiceSpec:
    """骰子项"""
    count: int  # 骰子数量
    sides: int  # 骰子面数


@dataclass(frozen=True)
class RerollRule:
    """重骰规则，limit 为整个表达式共享的重骰次数"""
    condition: Condition
    limit: int


@dataclass(frozen=True)
class ExplodeRule:
    """爆骰规则，limit 为每颗骰子的爆骰次数上限"""
    condition: Condition
    limit: int


@dataclass(frozen=True)
class KeepDropRule:
    """保留/丢弃规则"""
    mode: KeepDropMode
    count: int


@dataclass(frozen=True)
class DiceExpression:
    """单个骰点表达式"""

    raw: str  # 原始表达式
    dice: DiceSpec
    reroll: Optional[RerollRule] = None
    explode: Optional[ExplodeRule] = None
    keep_drop: Optional[KeepDropRule] = None
    modifier: int = 0  # 常数修正值

    @property
    def count(self) -> int:
        return self.dice.count

    @property
    def sides(self) -> int:
        return self.dice.sides


class DiceParser:
    """骰点表达式解析器"""

    NOTATION_PATTERN = re.compile(
        r"(?P<count>\d+)d(?P<sides>\d+)"
        rf"(?P<reroll>r(?:{COMPARATOR_PATTERN})?\d+(?:L\d+)?)?"
        rf"(?P<explode>!(?:{COMPARATOR_PATTERN})?\d*(?:L\d+)?)?"
        r"(?:(?P<keep_op>kh|kl|dh|dl)(?P<keep_count>\d+))?"
        r"\s*(?P<modifier>[+-]\s*\d+)?",
        re.IGNORECASE | re.ASCII,
    )

    REROLL_PATTERN = re.compile(
        rf"r(?P<op>{COMPARATOR_PATTERN})?(?P<target>\d+)(?:L(?P<limit>\d+))?",
        re.IGNORECASE | re.ASCII,
    )

    EXPLODE_PATTERN = re.compile(
        rf"!(?P<op>{COMPARATOR_PATTERN})?(?P<target>\d*)(?:L(?P<limit>\d+))?",
        re.IGNORECASE | re.ASCII,
    )

    @classmethod
    def parse(
        cls,
        expression: str,
        max_dice: Optional[int] = None,
        max_explosions: Optional[int] = None,
    ) -> DiceExpression:
        """解析单个骰点表达式

        Args:
            expression: 已去除首尾空白的表达式，如 "4d6kh3+2"
            max_dice: 骰子数量上限，默认取配置
            max_explosions: 每颗骰子默认爆骰上限，默认取配置

        Raises:
            DiceSyntaxError: 表达式不符合语法
            DiceDomainError: 数量不合法
        """
        if max_dice is None:
            max_dice = settings.max_dice
        if max_explosions is None:
            max_explosions = settings.max_explosions

        match = cls.NOTATION_PATTERN.fullmatch(expression)
        if not match:
            raise DiceSyntaxError(
                f'Invalid dice notation: "{expression}". '
                f'Expected format like "{EXAMPLE_NOTATION}".',
                expression,
            )

        dice = DiceSpec(count=int(match.group("count")), sides=int(match.group("sides")))
        if dice.count <= 0 or dice.sides <= 0:
            raise DiceDomainError("Number of dice and number of sides must be positive.")
        if dice.count > max_dice:
            raise DiceDomainError(f"Cannot roll more than {max_dice} dice at once.")

        # 保留/丢弃必须在任何掷骰之前校验
        keep_drop = None
        if match.group("keep_op"):
            keep_drop = KeepDropRule(
                mode=KeepDropMode(match.group("keep_op").lower()),
                count=int(match.group("keep_count")),
            )
            cls.validate_keep_drop(keep_drop, dice.count)

        reroll = None
        if match.group("reroll"):
            reroll = cls.parse_reroll(match.group("reroll"), dice.count)

        explode = None
        if match.group("explode"):
            explode = cls.parse_explode(match.group("explode"), dice.sides, max_explosions)

        modifier = 0
        if match.group("modifier"):
            modifier = int(re.sub(r"\s", "", match.group("modifier")))

        parsed = DiceExpression(
            raw=expression,
            dice=dice,
            reroll=reroll,
            explode=explode,
            keep_drop=keep_drop,
            modifier=modifier,
        )
        logger.debug(
            f"PARSE | expr={expression} | dice={dice.count}d{dice.sides} | "
            f"reroll={reroll} | explode={explode} | keep_drop={keep_drop} | mod={modifier}"
        )
        return parsed

    @classmethod
    def parse_reroll(cls, clause: str, num_dice: int) -> RerollRule:
        """解析重骰子句，如 r1, r<2, r=10L1；未指定次数时为骰子数量"""
        match = cls.REROLL_PATTERN.fullmatch(clause)
        if not match:
            raise DiceSyntaxError(f'Invalid reroll syntax: "{clause}"', clause)
        limit = match.group("limit")
        return RerollRule(
            condition=Condition(
                Comparator.from_token(match.group("op")), int(match.group("target"))
            ),
            limit=int(limit) if limit else num_dice,
        )

    @classmethod
    def parse_explode(cls, clause: str, num_sides: int, default_limit: int = 100) -> ExplodeRule:
        """解析爆骰子句，如 !, !>5, !L1；未指定目标时为最大面"""
        match = cls.EXPLODE_PATTERN.fullmatch(clause)
        if not match:
            raise DiceSyntaxError(f'Invalid explode syntax: "{clause}"', clause)
        target = match.group("target")
        limit = match.group("limit")
        return ExplodeRule(
            condition=Condition(
                Comparator.from_token(match.group("op")),
                int(target) if target else num_sides,
            ),
            limit=int(limit) if limit else default_limit,
        )

    @staticmethod
    def validate_keep_drop(rule: KeepDropRule, num_dice: int) -> None:
        """校验保留/丢弃数量"""
        if not rule.mode.is_keep and rule.count >= num_dice:
            raise DiceDomainError("Cannot drop all dice or more dice than were rolled.")
        if rule.mode.is_keep and rule.count > num_dice:
            raise DiceDomainError("Cannot keep more dice than were rolled.")
        if rule.mode.is_keep and rule.count == 0:
            raise DiceDomainError("Cannot keep zero dice.")

    @classmethod
    def is_valid(cls, expression: str) -> bool:
        """检查表达式是否有效"""
        try:
            cls.parse(expression.strip())
        except DiceError:
            return False
        return True
