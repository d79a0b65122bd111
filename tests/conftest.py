"""测试公共夹具"""
import pytest
from loguru import logger

from trpg_dice.dice import RandomSource


@pytest.fixture
def draws():
    """按给定 [0,1) 序列出数的随机源"""
    def _make(*values: float) -> RandomSource:
        return RandomSource(iter(values).__next__)
    return _make


@pytest.fixture
def no_draws():
    """任何取数都会失败的随机源，用于验证掷骰前校验"""
    def _fail() -> float:
        raise AssertionError("random source should not be consumed")
    return RandomSource(_fail)


@pytest.fixture
def log_messages():
    """收集 loguru 输出"""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
