"""
AWS S3 Storage Provider

boto3 기반 S3 어댑터
- Multipart upload (multipart_threshold 옵션)
- 서명 URL / 서명 POST
- 버킷/오브젝트 미존재 시 공통 예외 변환
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

import boto3
from boto3.s3.transfer import TransferConfig
from botocore.config import Config
from botocore.exceptions import ClientError
from loguru import logger

from cloud_storage_interface.errors import BucketNotFoundError, ObjectNotFoundError
from cloud_storage_interface.providers.base import (
    DEFAULT_PRESIGNED_POST_EXPIRY,
    MAX_PRESIGNED_URL_EXPIRY,
    CloudStorageInterface,
    FileArg,
    ObjectDetails,
    ObjectListingEntry,
    PresignedPost,
    UploadResult,
)


BUCKET_NOT_FOUND_CODES = {"404", "NoSuchBucket"}
OBJECT_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def _error_code(error: ClientError) -> Optional[str]:
    return error.response.get("Error", {}).get("Code")


class AwsS3Interface(CloudStorageInterface):
    """
    AWS S3 Storage Provider

    endpoint_url을 지정하면 LocalStack, MinIO 등 S3 호환 스토리지에도 사용 가능
    """

    def __init__(
        self,
        region: str = "us-east-1",
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        max_retries: int = 5,
        connect_timeout: int = 10,
        read_timeout: int = 60,
    ):
        """
        S3 어댑터 초기화

        Args:
            region: AWS 리전
            access_key_id: AWS Access Key (None이면 환경변수/IAM 사용)
            secret_access_key: AWS Secret Key
            endpoint_url: 커스텀 엔드포인트 (LocalStack 등)
            max_retries: 최대 재시도 횟수 (SDK 내부 재시도)
            connect_timeout: 연결 타임아웃 (초)
            read_timeout: 읽기 타임아웃 (초)
        """
        self.region = region
        self.endpoint_url = endpoint_url.rstrip("/") if endpoint_url else None
        self._client = None

        # boto3 설정
        self._config_kwargs: Dict[str, Any] = {
            "region_name": region,
            "config": Config(
                signature_version="s3v4",
                retries={
                    "max_attempts": max_retries,
                    "mode": "adaptive",
                },
                connect_timeout=connect_timeout,
                read_timeout=read_timeout,
            ),
        }

        if access_key_id and secret_access_key:
            self._config_kwargs["aws_access_key_id"] = access_key_id
            self._config_kwargs["aws_secret_access_key"] = secret_access_key

        if self.endpoint_url:
            self._config_kwargs["endpoint_url"] = self.endpoint_url

    @property
    def client(self):
        """boto3 S3 클라이언트 (lazy loading)"""
        if self._client is None:
            self._client = boto3.client("s3", **self._config_kwargs)
        return self._client

    @property
    def provider_name(self) -> str:
        return "aws_s3"

    def upload_file(
        self,
        bucket_name: str,
        key: str,
        file: FileArg,
        **opts,
    ) -> UploadResult:
        """파일 업로드"""
        local_path = self._resolve_local_path(file)
        if not local_path.exists():
            raise FileNotFoundError(f"Local file not found: {local_path}")

        self._get_bucket(bucket_name)

        extra_args = {
            "ContentType": opts.get("content_type") or self._get_content_type(local_path),
        }
        if opts.get("acl"):
            extra_args["ACL"] = str(opts["acl"])

        transfer_config = None
        if opts.get("multipart_threshold"):
            transfer_config = TransferConfig(multipart_threshold=int(opts["multipart_threshold"]))

        self.client.upload_file(
            str(local_path),
            bucket_name,
            key,
            ExtraArgs=extra_args,
            Config=transfer_config,
        )

        # 업로드 확인
        head = self.client.head_object(Bucket=bucket_name, Key=key)
        etag = head.get("ETag", "").strip('"')

        logger.info(f"Uploaded {local_path} to s3://{bucket_name}/{key}")

        return UploadResult(
            checksum=etag,
            etag=etag,
            key=key,
            mime_type=head.get("ContentType"),
            size=head.get("ContentLength"),
        )

    def presigned_url(
        self,
        bucket_name: str,
        key: str,
        expires_in: int,
        response_content_type: Optional[str] = None,
    ) -> str:
        """다운로드용 서명 URL 생성"""
        if expires_in > MAX_PRESIGNED_URL_EXPIRY:
            raise ValueError(
                f"expires_in must be at most {MAX_PRESIGNED_URL_EXPIRY} seconds, got {expires_in}"
            )

        params = {"Bucket": bucket_name, "Key": key}
        if response_content_type:
            params["ResponseContentType"] = response_content_type

        return self.client.generate_presigned_url(
            "get_object",
            Params=params,
            ExpiresIn=expires_in,
        )

    def download_file(self, bucket_name: str, key: str, local_path: Union[str, Path]) -> bool:
        """파일 다운로드"""
        self._get_object(bucket_name, key)

        local_path = Path(local_path)
        local_path.parent.mkdir(parents=True, exist_ok=True)

        self.client.download_file(bucket_name, key, str(local_path))
        logger.info(f"Downloaded s3://{bucket_name}/{key} to {local_path}")

        return local_path.exists()

    def delete_file(self, bucket_name: str, key: str) -> None:
        """오브젝트 삭제"""
        self._get_object(bucket_name, key)
        self.client.delete_object(Bucket=bucket_name, Key=key)
        logger.info(f"Deleted s3://{bucket_name}/{key}")

    def file_exists(self, bucket_name: str, key: str) -> bool:
        """오브젝트 존재 여부"""
        self._get_bucket(bucket_name)
        try:
            self.client.head_object(Bucket=bucket_name, Key=key)
        except ClientError as e:
            if _error_code(e) in OBJECT_NOT_FOUND_CODES:
                return False
            raise
        return True

    def list_objects(
        self,
        bucket_name: str,
        prefix: str = "",
        fetch_object_content_type: bool = False,
    ) -> List[ObjectListingEntry]:
        """오브젝트 목록 조회"""
        self._get_bucket(bucket_name)

        entries = []
        paginator = self.client.get_paginator("list_objects_v2")

        for page in paginator.paginate(Bucket=bucket_name, Prefix=prefix):
            for obj in page.get("Contents", []):
                content_type = None
                # 목록 응답에는 Content-Type이 없어 오브젝트별 HEAD 필요
                if fetch_object_content_type:
                    head = self.client.head_object(Bucket=bucket_name, Key=obj["Key"])
                    content_type = head.get("ContentType")

                entries.append(ObjectListingEntry(
                    key=obj["Key"],
                    content_type=content_type,
                    last_modified=obj.get("LastModified"),
                ))

        logger.debug(f"Listed {len(entries)} objects in s3://{bucket_name}/{prefix}")
        return entries

    def public_url(self, bucket_name: str, key: str) -> str:
        """서명 없는 정적 URL"""
        if self.endpoint_url:
            return f"{self.endpoint_url}/{bucket_name}/{key}"
        return f"https://{bucket_name}.s3.amazonaws.com/{key}"

    def presigned_post(
        self,
        bucket_name: str,
        key: str,
        acl: str,
        success_action_status: str,
        expiration: Optional[datetime] = None,
    ) -> PresignedPost:
        """브라우저 업로드용 서명 POST 생성"""
        self._get_bucket(bucket_name)

        expires_in = DEFAULT_PRESIGNED_POST_EXPIRY
        if expiration is not None:
            expires_in = self._seconds_until(expiration)

        conditions = [
            {"acl": acl},
            {"success_action_status": str(success_action_status)},
            ["starts-with", "$Content-Type", ""],
        ]

        post = self.client.generate_presigned_post(
            Bucket=bucket_name,
            Key=key,
            Fields={"acl": acl, "success_action_status": str(success_action_status)},
            Conditions=conditions,
            ExpiresIn=expires_in,
        )

        fields = dict(post["fields"])
        fields.update(acl=acl, success_action_status=str(success_action_status))

        return PresignedPost(
            fields=fields,
            url={"host": urlparse(post["url"]).hostname},
        )

    def object_details(self, bucket_name: str, key: str) -> ObjectDetails:
        """오브젝트 메타데이터 조회"""
        head = self._get_object(bucket_name, key)
        return ObjectDetails(
            etag=head.get("ETag", "").strip('"'),
            content_type=head.get("ContentType"),
        )

    def _get_bucket(self, bucket_name: str) -> str:
        """버킷 확인 (없으면 BucketNotFoundError)"""
        try:
            self.client.head_bucket(Bucket=bucket_name)
        except ClientError as e:
            if _error_code(e) in BUCKET_NOT_FOUND_CODES:
                logger.warning(f"Bucket not found: {bucket_name}")
                raise BucketNotFoundError(bucket_name) from e
            raise
        return bucket_name

    def _get_object(self, bucket_name: str, key: str) -> Dict[str, Any]:
        """오브젝트 HEAD 응답 (버킷/오브젝트가 없으면 예외)"""
        self._get_bucket(bucket_name)
        try:
            return self.client.head_object(Bucket=bucket_name, Key=key)
        except ClientError as e:
            if _error_code(e) in OBJECT_NOT_FOUND_CODES:
                logger.warning(f"Object not found: s3://{bucket_name}/{key}")
                raise ObjectNotFoundError(bucket_name, key) from e
            raise

    @staticmethod
    def _seconds_until(expiration: datetime) -> int:
        """만료 시각까지 남은 초 (naive datetime은 UTC로 간주)"""
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=timezone.utc)
        seconds = int((expiration - datetime.now(timezone.utc)).total_seconds())
        if seconds <= 0:
            raise ValueError(f"expiration must be in the future, got {expiration.isoformat()}")
        return seconds
