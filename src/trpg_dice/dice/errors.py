"""骰点表达式异常"""


class DiceError(ValueError):
    """骰点错误基类"""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DiceSyntaxError(DiceError):
    """表达式语法错误（整体表达式、重骰子句、爆骰子句、成功条件）"""

    def __init__(self, message: str, expression: str = "") -> None:
        self.expression = expression  # 出错的原始文本
        super().__init__(message)


class DiceDomainError(DiceError):
    """语法正确但数值不合法（骰子数量、面数、保留/丢弃数量）"""
