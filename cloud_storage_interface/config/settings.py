"""
Cloud Storage Interface 설정 관리

환경 변수 기반으로 스토리지 제공자 및 로깅 설정을 관리합니다.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()


class Config:
    """애플리케이션 설정"""

    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # 활성 스토리지 제공자 (aws_s3, gcp_gcs)
    CLOUD_STORAGE_PROVIDER: str = os.getenv("CLOUD_STORAGE_PROVIDER", "gcp_gcs")

    # AWS 설정
    AWS_ACCESS_KEY_ID: str = os.getenv("AWS_ACCESS_KEY_ID", "")
    AWS_SECRET_ACCESS_KEY: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
    AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
    AWS_S3_ENDPOINT_URL: Optional[str] = os.getenv("AWS_S3_ENDPOINT_URL")

    # GCP 설정
    GCP_PROJECT_ID: str = os.getenv("GCP_PROJECT_ID", "gcp-us-central1-prod")
    GCP_CREDENTIALS_PATH: Optional[str] = os.getenv("GCP_CREDENTIALS_PATH")

    # SDK 클라이언트 설정
    STORAGE_MAX_RETRIES: int = int(os.getenv("STORAGE_MAX_RETRIES", "5"))
    STORAGE_CONNECT_TIMEOUT: int = int(os.getenv("STORAGE_CONNECT_TIMEOUT", "10"))
    STORAGE_READ_TIMEOUT: int = int(os.getenv("STORAGE_READ_TIMEOUT", "60"))

    # 로깅
    LOG_LEVEL: Optional[str] = os.getenv("LOG_LEVEL")  # None이면 DEBUG 여부로 결정
    LOGS_DIR: Optional[Path] = Path(os.environ["LOGS_DIR"]) if os.getenv("LOGS_DIR") else None

    @classmethod
    def ensure_directories(cls):
        """로그 디렉토리 생성 (설정된 경우만)"""
        if cls.LOGS_DIR is not None:
            cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)


class DevelopmentConfig(Config):
    """개발 환경 설정"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """프로덕션 환경 설정"""
    DEBUG = False
    TESTING = False


class TestConfig(Config):
    """테스트 환경 설정"""
    DEBUG = True
    TESTING = True
    LOGS_DIR = None


# 환경별 설정 선택
_env = os.getenv("ENVIRONMENT", "development").lower()
if _env == "production":
    config = ProductionConfig()
elif _env == "test":
    config = TestConfig()
else:
    config = DevelopmentConfig()

# 디렉토리 생성
config.ensure_directories()
