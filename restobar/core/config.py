# restobar/core/config.py

from typing import List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일
        env_file_encoding='utf-8',
        extra='ignore',                            # 모델에 없는 변수는 무시
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "RestoBar API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Restaurant back-office API (catalog, inventory, staff, roles)"
    APP_ENV: str = Field("development", description="Application environment (development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Echo SQL statements and enable verbose logging")
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(
        SecretStr("sqlite+aiosqlite:///" + os.path.join(BASE_DIR, "restobar.db")),
        description="Async database URL (postgresql+asyncpg://... in production)"
    )

    # --- JWT 설정 ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for JWT token signing. Keep this highly secure!")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60, description="Access token expiration time in minutes")

    # --- 목록 조회 (페이지네이션) ---
    DEFAULT_PER_PAGE: int = Field(15, ge=1, description="Page size when per_page is not given")
    MAX_PER_PAGE: int = Field(100, ge=1, description="Upper bound accepted for per_page")

    # --- 다국어 메시지 ---
    DEFAULT_LOCALE: str = Field("es", description="Locale used when Accept-Language matches nothing")
    SUPPORTED_LOCALES: List[str] = Field(default_factory=lambda: ["es", "en"])

    # --- CORS ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # --- 초기 관리자 계정 (seed 스크립트에서 사용) ---
    ADMIN_EMAIL: str = Field("admin@restobar.com", description="Seeded administrator e-mail")
    ADMIN_PASSWORD: SecretStr = Field(SecretStr("admin12345"), description="Seeded administrator password")


settings = Settings()
