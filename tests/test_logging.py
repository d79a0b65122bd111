"""日志模块测试"""
import sys

import pytest
from loguru import logger

from trpg_dice import DiceSyntaxError, roll
from trpg_dice.logging import get_logger, log_roll, setup_logging


@pytest.fixture
def restore_logger(monkeypatch):
    """测试后恢复默认 stderr 输出"""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestLogRoll:
    """测试骰点日志装饰器"""

    def test_success_logged(self, log_messages):
        roll("1d6")
        assert any("ROLL | op=roll | notation=1d6" in m for m in log_messages)
        assert any("ROLL_OK | op=roll | notation=1d6" in m for m in log_messages)

    def test_parse_and_pool_logged(self, log_messages):
        roll("2d6kh1")
        assert any("PARSE | expr=2d6kh1" in m for m in log_messages)
        assert any("ROLL_POOL | expr=2d6kh1" in m for m in log_messages)

    def test_dice_error_logged_as_warning(self, log_messages):
        with pytest.raises(DiceSyntaxError):
            roll("bad")
        errors = [m for m in log_messages if "ROLL_ERR" in m]
        assert len(errors) == 1
        assert errors[0].startswith("WARNING")
        assert "DiceSyntaxError" in errors[0]

    def test_unexpected_error_reraised(self, log_messages):
        @log_roll
        def broken(notation: str):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            broken("1d6")
        assert any(m.startswith("ERROR") and "ROLL_ERR | op=broken" in m for m in log_messages)

    def test_wraps_metadata(self):
        assert roll.__name__ == "roll"


class TestSetupLogging:
    """测试日志配置"""

    def test_file_output(self, tmp_path, restore_logger):
        setup_logging(level="DEBUG", log_path=tmp_path, enable_console=False)
        logger.info("file sink check")
        logger.remove()

        files = list(tmp_path.glob("dice_*.log"))
        assert len(files) == 1
        assert "file sink check" in files[0].read_text(encoding="utf-8")

    def test_no_file_without_path(self, tmp_path, restore_logger):
        setup_logging(level="INFO", enable_console=False)
        logger.info("nowhere")
        assert list(tmp_path.iterdir()) == []

    def test_env_level_overrides(self, tmp_path, restore_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        setup_logging(level="DEBUG", log_path=tmp_path, enable_console=False)
        logger.info("hidden")
        logger.warning("shown")
        logger.remove()

        content = next(tmp_path.glob("dice_*.log")).read_text(encoding="utf-8")
        assert "shown" in content
        assert "hidden" not in content

    def test_get_logger_binds_component(self):
        messages = []
        handler_id = logger.add(messages.append, format="[{extra[component]}] {message}")
        try:
            get_logger("parser").info("bound")
            get_logger().info("default")
        finally:
            logger.remove(handler_id)
        assert "[parser] bound\n" in messages
        assert "[dice] default\n" in messages

    def test_library_logs_carry_component(self):
        messages = []
        handler_id = logger.add(messages.append, level="DEBUG", format="[{extra[component]}] {message}")
        try:
            roll("2d6kh1")
        finally:
            logger.remove(handler_id)
        assert any(m.startswith("[parser] PARSE") for m in messages)
        assert any(m.startswith("[roller] ROLL_POOL") for m in messages)
        assert any(m.startswith("[roll] ROLL_OK") for m in messages)
