# 환경변수 로딩 (.env)
from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    MONGODB_URI: str = "mongodb://localhost:27017"  # 필요 시 prod/staging로 분리
    MONGODB_DB: str = "moodchef"
    RECIPES_COLLECTION: str = "recipes"

    # 추천: 쿼리당 후보 수 / 기본 반환 수 / 요청 가능한 최대 반환 수
    CANDIDATE_LIMIT: int = 10
    DEFAULT_TOP_N: int = 3
    MAX_TOP_N: int = 10

    DB_INIT_RETRIES: int = 20
    CORS_ORIGINS: List[str] = ["*"]  # 모바일 앱은 임의 호스트에서 호출
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
