"""애플리케이션 설정"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """환경 변수 기반 설정"""

    database_url: str = Field(default="", description="비어 있으면 DB 미설정 - 재고 조회는 기본값, 쓰기는 실패")
    log_level: str = "INFO"
    cors_origins: str = "*"
    business_timezone: str = "Australia/Sydney"
    max_capa: int = 30  # 날짜별 최대 주문 수
    weekly_order_weeks_ahead: int = 1  # 정기 주문 생성 시 추가할 주 수
    weekly_order_keep_weeks: int = 2  # 정기 주문 유지 범위: 이번 주 + N주
    maintenance_batch_size: int = 500
    lunchbox_price: int = 1

    model_config = {"env_prefix": ""}

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()
