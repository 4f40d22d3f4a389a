"""
Storage Adapter Factory

설정(CLOUD_STORAGE_PROVIDER)에 따라 제공자 어댑터를 생성하고
프로세스 단위 싱글톤으로 보관한다.
"""

from typing import Dict, Optional

from loguru import logger

from cloud_storage_interface.config import config
from cloud_storage_interface.errors import UnsupportedProviderError
from cloud_storage_interface.providers.base import CloudStorageInterface
from cloud_storage_interface.providers.gcs_provider import GcpGcsInterface
from cloud_storage_interface.providers.s3_provider import AwsS3Interface


PROVIDER_ALIASES = {
    "aws_s3": "aws_s3",
    "s3": "aws_s3",
    "gcp_gcs": "gcp_gcs",
    "gcs": "gcp_gcs",
}

# 제공자별 싱글톤 어댑터
_adapters: Dict[str, CloudStorageInterface] = {}


def normalize_provider_name(provider: str) -> str:
    """제공자 이름 정규화 (별칭, 대소문자)"""
    name = PROVIDER_ALIASES.get((provider or "").strip().lower())
    if name is None:
        raise UnsupportedProviderError(provider)
    return name


def create_storage_adapter(provider: Optional[str] = None, **overrides) -> CloudStorageInterface:
    """
    새 어댑터 생성 (캐시하지 않음)

    Args:
        provider: 제공자 이름 (None이면 config.CLOUD_STORAGE_PROVIDER)
        **overrides: 생성자 인자 재정의

    Returns:
        CloudStorageInterface 구현체
    """
    name = normalize_provider_name(provider or config.CLOUD_STORAGE_PROVIDER)

    if name == "aws_s3":
        kwargs = {
            "region": config.AWS_REGION,
            "access_key_id": config.AWS_ACCESS_KEY_ID or None,
            "secret_access_key": config.AWS_SECRET_ACCESS_KEY or None,
            "endpoint_url": config.AWS_S3_ENDPOINT_URL,
            "max_retries": config.STORAGE_MAX_RETRIES,
            "connect_timeout": config.STORAGE_CONNECT_TIMEOUT,
            "read_timeout": config.STORAGE_READ_TIMEOUT,
        }
        kwargs.update(overrides)
        return AwsS3Interface(**kwargs)

    kwargs = {
        "project_id": config.GCP_PROJECT_ID,
        "credentials_path": config.GCP_CREDENTIALS_PATH,
    }
    kwargs.update(overrides)
    return GcpGcsInterface(**kwargs)


def get_storage_adapter(provider: Optional[str] = None) -> CloudStorageInterface:
    """활성 제공자 어댑터 싱글톤 반환"""
    name = normalize_provider_name(provider or config.CLOUD_STORAGE_PROVIDER)
    if name not in _adapters:
        _adapters[name] = create_storage_adapter(name)
        logger.info(f"Initialized cloud storage adapter: {name}")
    return _adapters[name]


def reset_storage_adapter():
    """싱글톤 캐시 초기화 (테스트, 재설정용)"""
    _adapters.clear()
