"""配置管理模块"""
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置，环境变量前缀为 DICE_"""

    model_config = SettingsConfigDict(
        env_prefix="DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 日志配置
    log_level: str = "INFO"
    log_path: Path = Path("logs")
    log_to_file: bool = False

    # 骰点限制
    max_dice: int = Field(1000, gt=0)  # 单个表达式最多骰子数
    max_explosions: int = Field(100, ge=0)  # 每颗骰子默认最多爆骰次数

    def safe_dict(self) -> dict:
        """返回配置字典，用于日志输出"""
        return {key: str(value) for key, value in self.model_dump().items()}

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in self.safe_dict().items())
        return f"Settings({items})"


settings = Settings()
