"""
应用配置
从环境变量 / .env 读取配置
"""
import logging
from typing import List, Optional
from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用设置"""

    # 应用基础配置
    APP_NAME: str = "Hotel Reservation"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # 查询不到空房时，向后顺延的推荐天数
    RECOMMENDATION_DAYS: int = 7

    # 房间号格式：三位数字
    ROOM_NUMBER_PATTERN: str = r"^[0-9]{3}$"

    # 测试数据生成
    # 房间号为 楼层(1 位) + 序号(2 位)，需满足 ROOM_NUMBER_PATTERN
    SEED_FLOORS: int = Field(5, ge=1, le=9)
    SEED_ROOMS_PER_FLOOR: int = Field(12, ge=1, le=99)
    SEED_RESERVATIONS: int = Field(32, ge=0)
    SEED_DATE_SPREAD_DAYS: int = Field(20, ge=1)
    SEED_RANDOM_SEED: Optional[int] = None

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


def setup_logging(app_settings: "Settings") -> None:
    """配置根日志（API 与 CLI 入口调用）"""
    level = logging.DEBUG if app_settings.DEBUG else app_settings.LOG_LEVEL.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# 全局设置实例
settings = Settings()
