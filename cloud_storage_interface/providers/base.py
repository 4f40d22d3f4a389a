"""
Storage Provider Base Interface

클라우드 스토리지 제공자 공통 인터페이스
- 모든 제공자는 동일한 메서드 이름과 반환 형태를 따른다
- 직접 인스턴스화 금지 (get_storage_adapter() 사용)
"""

import mimetypes
import os
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union


# S3 제한: 서명 URL 만료 시간은 최대 1주
MAX_PRESIGNED_URL_EXPIRY = 7 * 24 * 60 * 60
DEFAULT_PRESIGNED_POST_EXPIRY = 60 * 60

DEFAULT_CONTENT_TYPE = "application/octet-stream"

FileArg = Union[str, Path, BinaryIO]


@dataclass
class UploadResult:
    """업로드 결과"""
    checksum: Optional[str]
    etag: Optional[str]
    key: str
    mime_type: Optional[str] = None
    size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ObjectListingEntry:
    """오브젝트 목록 항목"""
    key: str
    content_type: Optional[str] = None
    last_modified: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PresignedPost:
    """브라우저 직접 업로드용 POST 정보 (url은 host만 포함)"""
    fields: Dict[str, str] = field(default_factory=dict)
    url: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ObjectDetails:
    """오브젝트 메타데이터"""
    etag: Optional[str]
    content_type: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CloudStorageInterface(ABC):
    """
    클라우드 스토리지 제공자 추상 인터페이스

    직접 생성하지 말고 get_storage_adapter()가 반환하는
    싱글톤 어댑터를 사용한다.
    """

    def __new__(cls, *args, **kwargs):
        if cls is CloudStorageInterface:
            raise TypeError(
                "Do not use CloudStorageInterface directly. "
                "Use get_storage_adapter() instead, which returns a singleton "
                "instance configured for a particular cloud storage provider."
            )
        return super().__new__(cls)

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """제공자 이름 (aws_s3, gcp_gcs)"""
        pass

    @abstractmethod
    def upload_file(
        self,
        bucket_name: str,
        key: str,
        file: FileArg,
        **opts,
    ) -> UploadResult:
        """
        파일 업로드 (같은 키가 있으면 덮어씀)

        Args:
            bucket_name: 버킷 이름
            key: 원격 키
            file: 열린 파일 객체 또는 로컬 경로
            **opts: multipart_threshold, acl, content_type

        Returns:
            UploadResult: 업로드 결과
        """
        pass

    @abstractmethod
    def presigned_url(
        self,
        bucket_name: str,
        key: str,
        expires_in: int,
        response_content_type: Optional[str] = None,
    ) -> str:
        """
        다운로드용 서명 URL 생성

        Args:
            bucket_name: 버킷 이름
            key: 원격 키
            expires_in: 만료 시간 (초, S3는 최대 1주)
            response_content_type: 응답 Content-Type 재정의

        Returns:
            서명된 URL
        """
        pass

    @abstractmethod
    def download_file(self, bucket_name: str, key: str, local_path: Union[str, Path]) -> bool:
        """
        파일 다운로드

        Returns:
            다운로드 후 로컬 파일 존재 여부
        """
        pass

    @abstractmethod
    def delete_file(self, bucket_name: str, key: str) -> None:
        """오브젝트 삭제 (없으면 ObjectNotFoundError)"""
        pass

    @abstractmethod
    def file_exists(self, bucket_name: str, key: str) -> bool:
        """오브젝트 존재 여부 (버킷이 없으면 BucketNotFoundError)"""
        pass

    @abstractmethod
    def list_objects(
        self,
        bucket_name: str,
        prefix: str = "",
        fetch_object_content_type: bool = False,
    ) -> List[ObjectListingEntry]:
        """
        오브젝트 목록 조회

        Args:
            bucket_name: 버킷 이름
            prefix: 접두사 (빈 문자열이면 전체)
            fetch_object_content_type: Content-Type 포함 여부

        Returns:
            ObjectListingEntry 리스트 (순서는 제공자 기준)
        """
        pass

    @abstractmethod
    def public_url(self, bucket_name: str, key: str) -> str:
        """
        서명 없는 정적 URL

        공개 버킷/오브젝트에서만 동작한다. 네트워크 호출 없음.
        """
        pass

    @abstractmethod
    def presigned_post(
        self,
        bucket_name: str,
        key: str,
        acl: str,
        success_action_status: str,
        expiration: Optional[datetime] = None,
    ) -> PresignedPost:
        """
        브라우저 업로드용 서명 POST 생성

        Args:
            bucket_name: 버킷 이름
            key: 원격 키 (${filename} 템플릿 허용)
            acl: 업로드 오브젝트 ACL
            success_action_status: 성공 시 응답 상태 코드
            expiration: 정책 만료 시각 (None이면 1시간 후)

        Returns:
            PresignedPost
        """
        pass

    @abstractmethod
    def object_details(self, bucket_name: str, key: str) -> ObjectDetails:
        """오브젝트 etag / content_type 조회"""
        pass

    @staticmethod
    def _resolve_local_path(file: FileArg) -> Path:
        """파일 객체 또는 경로를 로컬 경로로 변환"""
        if isinstance(file, (str, os.PathLike)):
            return Path(file)

        name = getattr(file, "name", None)
        if not isinstance(name, (str, os.PathLike)):
            raise TypeError(
                f"file must be a path or a file object opened from a path, got {type(file).__name__}"
            )
        return Path(name)

    @staticmethod
    def _get_content_type(file_path: Path) -> str:
        """Content-Type 추론"""
        content_type, _ = mimetypes.guess_type(str(file_path))
        return content_type or DEFAULT_CONTENT_TYPE
