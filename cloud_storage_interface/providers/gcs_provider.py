"""
GCS Storage Provider

google-cloud-storage 기반 GCS 어댑터
- S3 스타일 ACL 이름을 GCS predefined ACL로 변환
- V4 서명 URL / 서명 POST 정책
- 버킷/오브젝트 미존재 시 공통 예외 변환
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List, Optional, Union
from urllib.parse import urlparse

from google.cloud import storage
from loguru import logger

from cloud_storage_interface.errors import BucketNotFoundError, ObjectNotFoundError
from cloud_storage_interface.providers.base import (
    DEFAULT_PRESIGNED_POST_EXPIRY,
    CloudStorageInterface,
    FileArg,
    ObjectDetails,
    ObjectListingEntry,
    PresignedPost,
    UploadResult,
)


# ACL 매핑 (S3 canned ACL → GCS predefined ACL)
ACL_MAP: Dict[str, str] = {
    "private": "private",
    "public-read": "publicRead",
    "authenticated-read": "authenticatedRead",
    "bucket-owner-read": "bucketOwnerRead",
    "bucket-owner-full-control": "bucketOwnerFullControl",
}

PUBLIC_URL_BASE = "https://storage.googleapis.com"

# generate_signed_post_policy_v4가 key 필드에 돌려주는 ${filename} 형태
ESCAPED_FILENAME_TEMPLATE = "%24%7Bfilename%7D"


class GcpGcsInterface(CloudStorageInterface):
    """
    Google Cloud Storage Provider

    multipart_threshold 옵션은 GCS에 해당 개념이 없어 무시한다.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[str] = None,
    ):
        """
        GCS 어댑터 초기화

        Args:
            project_id: GCP 프로젝트 ID (None이면 SDK 기본값 사용)
            credentials_path: 서비스 계정 키 파일 경로
        """
        self.project_id = project_id
        self.credentials_path = credentials_path
        self._client = None

    @property
    def client(self):
        """google.cloud.storage 클라이언트 (lazy loading)"""
        if self._client is None:
            if self.credentials_path:
                self._client = storage.Client.from_service_account_json(
                    self.credentials_path,
                    project=self.project_id,
                )
            else:
                self._client = storage.Client(project=self.project_id)
        return self._client

    @property
    def provider_name(self) -> str:
        return "gcp_gcs"

    def upload_file(
        self,
        bucket_name: str,
        key: str,
        file: FileArg,
        **opts,
    ) -> UploadResult:
        """파일 업로드 (같은 키는 덮어씀)"""
        local_path = self._resolve_local_path(file)
        if not local_path.exists():
            raise FileNotFoundError(f"Local file not found: {local_path}")

        if opts.get("multipart_threshold"):
            logger.debug("multipart_threshold is not supported by GCS, ignoring")

        acl = opts.get("acl")
        predefined_acl = self._normalize_acl(acl) if acl else None

        blob = self._get_bucket(bucket_name).blob(key)
        blob.upload_from_filename(
            str(local_path),
            content_type=opts.get("content_type") or self._get_content_type(local_path),
            predefined_acl=predefined_acl,
        )

        logger.info(f"Uploaded {local_path} to gs://{bucket_name}/{key}")

        return UploadResult(
            checksum=blob.crc32c,
            etag=blob.etag,
            key=blob.name,
            mime_type=blob.content_type,
            size=blob.size,
        )

    def download_file(self, bucket_name: str, key: str, local_path: Union[str, Path]) -> bool:
        """파일 다운로드"""
        blob = self._get_object(bucket_name, key)

        local_path = Path(local_path)
        local_path.parent.mkdir(parents=True, exist_ok=True)

        blob.download_to_filename(str(local_path))
        logger.info(f"Downloaded gs://{bucket_name}/{key} to {local_path}")

        # S3 download_file과 동일한 반환값
        return local_path.exists()

    def presigned_url(
        self,
        bucket_name: str,
        key: str,
        expires_in: int,
        response_content_type: Optional[str] = None,
    ) -> str:
        """서명된 URL 생성"""
        blob = self._get_bucket(bucket_name, skip_lookup=True).blob(key)
        return blob.generate_signed_url(
            version="v4",
            expiration=timedelta(seconds=expires_in),
            method="GET",
            response_type=response_content_type,
        )

    def delete_file(self, bucket_name: str, key: str) -> None:
        """오브젝트 삭제"""
        self._get_object(bucket_name, key).delete()
        logger.info(f"Deleted gs://{bucket_name}/{key}")

    def file_exists(self, bucket_name: str, key: str) -> bool:
        """오브젝트 존재 여부 (버킷이 없으면 예외)"""
        return self._get_bucket(bucket_name).blob(key).exists()

    def list_objects(
        self,
        bucket_name: str,
        prefix: str = "",
        fetch_object_content_type: bool = False,
    ) -> List[ObjectListingEntry]:
        """오브젝트 목록 조회"""
        bucket = self._get_bucket(bucket_name)

        entries = [
            ObjectListingEntry(
                key=blob.name,
                content_type=blob.content_type if fetch_object_content_type else None,
                last_modified=blob.updated,
            )
            for blob in bucket.list_blobs(prefix=prefix)
        ]

        logger.debug(f"Listed {len(entries)} objects in gs://{bucket_name}/{prefix}")
        return entries

    def public_url(self, bucket_name: str, key: str) -> str:
        """서명 없는 정적 URL (공개 오브젝트 전용)"""
        return f"{PUBLIC_URL_BASE}/{bucket_name}/{key}"

    def presigned_post(
        self,
        bucket_name: str,
        key: str,
        acl: str,
        success_action_status: str,
        expiration: Optional[datetime] = None,
    ) -> PresignedPost:
        """
        브라우저 업로드용 서명 POST 정책 생성

        https://cloud.google.com/storage/docs/xml-api/post-object-forms
        """
        self._get_bucket(bucket_name)

        policy = {
            "expiration": expiration or (
                datetime.now(timezone.utc) + timedelta(seconds=DEFAULT_PRESIGNED_POST_EXPIRY)
            ),
            "conditions": [
                ["starts-with", "$key", ""],
                ["starts-with", "$Content-Type", ""],
                {"acl": acl},
                {"success_action_status": str(success_action_status)},
            ],
        }

        post = self.client.generate_signed_post_policy_v4(
            bucket_name,
            key,
            expiration=policy["expiration"],
            conditions=policy["conditions"],
        )

        fields = dict(post["fields"])

        # 정책 조건에 이스케이프된 ${filename}만 되돌리고 나머지 키는 그대로 둔다
        if "key" in fields:
            fields["key"] = fields["key"].replace(ESCAPED_FILENAME_TEMPLATE, "${filename}")

        # SDK 응답에 빠질 수 있어 직접 병합
        fields.update(acl=acl, success_action_status=str(success_action_status))

        return PresignedPost(
            fields=fields,
            url={"host": urlparse(post["url"]).hostname},
        )

    def object_details(self, bucket_name: str, key: str) -> ObjectDetails:
        """
        오브젝트 메타데이터 조회

        현재는 etag, content_type만 포함
        """
        blob = self._get_object(bucket_name, key)
        return ObjectDetails(etag=blob.etag, content_type=blob.content_type)

    def _get_bucket(self, bucket_name: str, skip_lookup: bool = False):
        """버킷 조회 (없으면 BucketNotFoundError)"""
        if skip_lookup:
            return self.client.bucket(bucket_name)

        bucket = self.client.lookup_bucket(bucket_name)
        if bucket is None:
            logger.warning(f"Bucket not found: {bucket_name}")
            raise BucketNotFoundError(bucket_name)
        return bucket

    def _get_object(self, bucket_name: str, key: str):
        """오브젝트 조회 (버킷/오브젝트가 없으면 예외)"""
        bucket = self._get_bucket(bucket_name)
        blob = bucket.get_blob(key)
        if blob is None:
            logger.warning(f"Object not found: gs://{bucket_name}/{key}")
            raise ObjectNotFoundError(bucket_name, key)
        return blob

    @staticmethod
    def _normalize_acl(acl: str) -> str:
        """S3 ACL 이름을 GCS predefined ACL로 변환"""
        acl = str(acl)
        return ACL_MAP.get(acl, acl)
