"""骰点日志装饰器

日志格式:
- 开始: ROLL | op=xxx | notation=xxx
- 成功: ROLL_OK | op=xxx | notation=xxx | duration=xxxms
- 失败: ROLL_ERR | op=xxx | notation=xxx | error=xxx
"""
import time
from functools import wraps
from typing import Callable, Any

from ..dice.errors import DiceError
from .config import get_logger

logger = get_logger("roll")


def log_roll(func: Callable) -> Callable:
    """记录骰点入口的表达式、耗时与结果，异常原样抛出"""
    @wraps(func)
    def wrapper(notation: str, *args, **kwargs) -> Any:
        start_time = time.perf_counter()
        op = func.__name__
        logger.debug(f"ROLL | op={op} | notation={notation}")

        try:
            result = func(notation, *args, **kwargs)
        except DiceError as e:
            # 用户输入错误，无需堆栈
            logger.warning(f"ROLL_ERR | op={op} | notation={notation} | error={type(e).__name__}: {e}")
            raise
        except Exception as e:
            logger.exception(f"ROLL_ERR | op={op} | notation={notation} | error={type(e).__name__}: {e}")
            raise

        duration = (time.perf_counter() - start_time) * 1000
        logger.debug(f"ROLL_OK | op={op} | notation={notation} | duration={duration:.2f}ms")
        return result

    return wrapper
