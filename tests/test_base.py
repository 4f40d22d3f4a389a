"""
공통 인터페이스 테스트

CloudStorageInterface 및 결과 데이터클래스
"""

import io
from datetime import datetime
from pathlib import Path

import pytest

from cloud_storage_interface.providers.base import (
    CloudStorageInterface,
    ObjectDetails,
    ObjectListingEntry,
    PresignedPost,
    UploadResult,
    MAX_PRESIGNED_URL_EXPIRY,
)


class TestCloudStorageInterface:
    """추상 인터페이스 테스트"""

    def test_direct_instantiation_fails(self):
        """직접 생성 시 TypeError"""
        with pytest.raises(TypeError, match="get_storage_adapter"):
            CloudStorageInterface()

    def test_incomplete_subclass_fails(self):
        """필수 메서드를 구현하지 않은 하위 클래스는 생성 불가"""

        class PartialAdapter(CloudStorageInterface):
            @property
            def provider_name(self):
                return "partial"

        with pytest.raises(TypeError):
            PartialAdapter()

    def test_required_operations(self):
        """필수 연산 목록"""
        expected = {
            "provider_name",
            "upload_file",
            "presigned_url",
            "download_file",
            "delete_file",
            "file_exists",
            "list_objects",
            "public_url",
            "presigned_post",
            "object_details",
        }
        assert CloudStorageInterface.__abstractmethods__ == expected

    def test_resolve_local_path_from_file_object(self, sample_file):
        """파일 객체는 name 속성으로 경로 해석"""
        with open(sample_file, "rb") as f:
            assert CloudStorageInterface._resolve_local_path(f) == sample_file

    def test_resolve_local_path_from_str(self):
        assert CloudStorageInterface._resolve_local_path("/tmp/a.txt") == Path("/tmp/a.txt")

    def test_resolve_local_path_from_path(self, sample_file):
        """Path 객체는 파일명만이 아닌 전체 경로 유지"""
        resolved = CloudStorageInterface._resolve_local_path(sample_file)

        assert resolved == sample_file
        assert resolved.exists()

    def test_resolve_local_path_from_nested_path(self):
        path = Path("/data/exports/2024/report.csv")

        assert CloudStorageInterface._resolve_local_path(path) == path

    def test_content_type_guess(self):
        """Content-Type 추론"""
        assert CloudStorageInterface._get_content_type(Path("a.png")) == "image/png"
        assert CloudStorageInterface._get_content_type(Path("a.unknownext")) == "application/octet-stream"

    def test_max_expiry_is_one_week(self):
        assert MAX_PRESIGNED_URL_EXPIRY == 604800


class TestValueTypes:
    """결과 데이터클래스 테스트"""

    def test_upload_result_to_dict(self):
        result = UploadResult(
            checksum="1234",
            etag="1234",
            key="bar",
            mime_type="image/png",
            size=12345,
        )

        assert result.to_dict() == {
            "checksum": "1234",
            "etag": "1234",
            "key": "bar",
            "mime_type": "image/png",
            "size": 12345,
        }

    def test_listing_entry_defaults(self):
        entry = ObjectListingEntry(key="a")

        assert entry.content_type is None
        assert entry.last_modified is None

    def test_listing_entry_to_dict(self):
        now = datetime(2024, 1, 1, 12, 0, 0)
        entry = ObjectListingEntry(key="a", content_type="text/plain", last_modified=now)

        assert entry.to_dict() == {"key": "a", "content_type": "text/plain", "last_modified": now}

    def test_presigned_post_defaults(self):
        post = PresignedPost()

        assert post.fields == {}
        assert post.url == {}

    def test_object_details(self):
        details = ObjectDetails(etag="abc", content_type="text/csv")

        assert details.to_dict() == {"etag": "abc", "content_type": "text/csv"}

    def test_file_like_without_name(self):
        """경로 name이 없는 파일 객체는 명확한 TypeError"""
        buffer = io.BytesIO(b"data")
        with pytest.raises(TypeError, match="file must be a path or a file object opened from a path, got BytesIO"):
            CloudStorageInterface._resolve_local_path(buffer)
