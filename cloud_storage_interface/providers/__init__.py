"""
Storage Providers

클라우드 스토리지 제공자 통합 모듈
- AWS S3 (boto3)
- GCS (google-cloud-storage)
"""

from cloud_storage_interface.providers.base import (
    CloudStorageInterface,
    UploadResult,
    ObjectListingEntry,
    PresignedPost,
    ObjectDetails,
    MAX_PRESIGNED_URL_EXPIRY,
    DEFAULT_PRESIGNED_POST_EXPIRY,
)
from cloud_storage_interface.providers.s3_provider import AwsS3Interface
from cloud_storage_interface.providers.gcs_provider import GcpGcsInterface

__all__ = [
    "CloudStorageInterface",
    "UploadResult",
    "ObjectListingEntry",
    "PresignedPost",
    "ObjectDetails",
    "MAX_PRESIGNED_URL_EXPIRY",
    "DEFAULT_PRESIGNED_POST_EXPIRY",
    "AwsS3Interface",
    "GcpGcsInterface",
]
