"""
Cloud Storage Interface

S3 / GCS 공통 오브젝트 스토리지 인터페이스
"""

from cloud_storage_interface.core.logging_config import setup_logger
from cloud_storage_interface.errors import (
    CloudStorageError,
    BucketNotFoundError,
    ObjectNotFoundError,
    UnsupportedProviderError,
)
from cloud_storage_interface.providers import (
    CloudStorageInterface,
    UploadResult,
    ObjectListingEntry,
    PresignedPost,
    ObjectDetails,
    AwsS3Interface,
    GcpGcsInterface,
)
from cloud_storage_interface.factory import (
    create_storage_adapter,
    get_storage_adapter,
    reset_storage_adapter,
)

__version__ = "0.1.0"

__all__ = [
    "CloudStorageError",
    "BucketNotFoundError",
    "ObjectNotFoundError",
    "UnsupportedProviderError",
    "CloudStorageInterface",
    "UploadResult",
    "ObjectListingEntry",
    "PresignedPost",
    "ObjectDetails",
    "AwsS3Interface",
    "GcpGcsInterface",
    "create_storage_adapter",
    "get_storage_adapter",
    "reset_storage_adapter",
    "setup_logger",
]
