"""
Cloud Storage Errors

스토리지 어댑터 공통 예외
- 버킷/오브젝트 조회 실패는 SDK 종류와 무관하게 동일한 예외로 전달
- 그 외 SDK 오류(인증, 네트워크, 쿼터)는 그대로 전파
"""

from typing import Optional


class CloudStorageError(Exception):
    """스토리지 어댑터 예외 기본 클래스"""


class BucketNotFoundError(CloudStorageError):
    """버킷이 존재하지 않음"""

    def __init__(self, bucket_name: str, message: Optional[str] = None):
        self.bucket_name = bucket_name
        super().__init__(message or f'Bucket "{bucket_name}" not found')


class ObjectNotFoundError(CloudStorageError):
    """버킷 안에 오브젝트가 존재하지 않음"""

    def __init__(self, bucket_name: str, key: str, message: Optional[str] = None):
        self.bucket_name = bucket_name
        self.key = key
        super().__init__(
            message or f'Object "{key}" not found in bucket "{bucket_name}"'
        )


class UnsupportedProviderError(CloudStorageError, ValueError):
    """지원하지 않는 스토리지 제공자"""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unknown cloud storage provider: {provider}")
