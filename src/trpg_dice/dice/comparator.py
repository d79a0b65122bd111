"""比较条件

重骰、爆骰和成功计数共用的比较运算：`=`, `<`, `>`, `<=`, `>=`。
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import DiceSyntaxError

# 比较符片段，供语法正则复用（`<=`/`>=` 必须先于 `<`/`>`）
COMPARATOR_PATTERN = r"<=|>=|<|>|="

CONDITION_PATTERN = re.compile(rf"(?P<op>{COMPARATOR_PATTERN})?(?P<target>\d+)", re.ASCII)


class Comparator(Enum):
    """比较运算符"""
    EQ = "="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="

    @classmethod
    def from_token(cls, token: Optional[str]) -> "Comparator":
        """由文本符号得到运算符，缺省为 `=`"""
        return cls(token) if token else cls.EQ

    def evaluate(self, value: int, target: int) -> bool:
        if self is Comparator.EQ:
            return value == target
        if self is Comparator.LT:
            return value < target
        if self is Comparator.GT:
            return value > target
        if self is Comparator.LE:
            return value <= target
        return value >= target


@dataclass(frozen=True)
class Condition:
    """比较条件: 运算符 + 目标值"""
    comparator: Comparator
    target: int

    def matches(self, value: int) -> bool:
        return self.comparator.evaluate(value, self.target)

    def __str__(self) -> str:
        return f"{self.comparator.value}{self.target}"

    @classmethod
    def parse(cls, text: str) -> "Condition":
        """解析成功条件，如 ">=5", "<3", "6"

        Raises:
            DiceSyntaxError: 条件格式不合法
        """
        match = CONDITION_PATTERN.fullmatch(text.strip())
        if not match:
            raise DiceSyntaxError(f'Invalid success condition: "{text}"', text)
        return cls(
            comparator=Comparator.from_token(match.group("op")),
            target=int(match.group("target")),
        )
