"""
Storage Adapter Factory 테스트
"""

import pytest

from cloud_storage_interface import factory
from cloud_storage_interface.config import config
from cloud_storage_interface.errors import UnsupportedProviderError
from cloud_storage_interface.providers import AwsS3Interface, GcpGcsInterface


class TestNormalizeProviderName:
    """제공자 이름 정규화 테스트"""

    @pytest.mark.parametrize("name, expected", [
        ("aws_s3", "aws_s3"),
        ("S3", "aws_s3"),
        (" gcs ", "gcp_gcs"),
        ("GCP_GCS", "gcp_gcs"),
    ])
    def test_aliases(self, name, expected):
        assert factory.normalize_provider_name(name) == expected

    def test_unknown_provider(self):
        with pytest.raises(UnsupportedProviderError):
            factory.normalize_provider_name("azure_blob")

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError, match="azure_blob"):
            factory.normalize_provider_name("azure_blob")


class TestCreateStorageAdapter:
    """어댑터 생성 테스트"""

    def test_create_s3_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "AWS_REGION", "ap-northeast-2")
        monkeypatch.setattr(config, "AWS_S3_ENDPOINT_URL", "http://localhost:4566")

        adapter = factory.create_storage_adapter("aws_s3")

        assert isinstance(adapter, AwsS3Interface)
        assert adapter.region == "ap-northeast-2"
        assert adapter.endpoint_url == "http://localhost:4566"

    def test_create_gcs_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "GCP_PROJECT_ID", "my-project")

        adapter = factory.create_storage_adapter("gcs")

        assert isinstance(adapter, GcpGcsInterface)
        assert adapter.project_id == "my-project"

    def test_overrides(self):
        adapter = factory.create_storage_adapter("gcs", project_id="override")

        assert adapter.project_id == "override"

    def test_create_is_not_cached(self):
        assert factory.create_storage_adapter("s3") is not factory.create_storage_adapter("s3")


class TestGetStorageAdapter:
    """싱글톤 어댑터 테스트"""

    def test_uses_configured_provider(self, monkeypatch):
        monkeypatch.setattr(config, "CLOUD_STORAGE_PROVIDER", "aws_s3")

        assert isinstance(factory.get_storage_adapter(), AwsS3Interface)

    def test_uses_configured_gcs(self, monkeypatch):
        monkeypatch.setattr(config, "CLOUD_STORAGE_PROVIDER", "gcp_gcs")

        assert isinstance(factory.get_storage_adapter(), GcpGcsInterface)

    def test_singleton(self):
        first = factory.get_storage_adapter("gcp_gcs")

        assert factory.get_storage_adapter("gcs") is first
        assert factory.get_storage_adapter("aws_s3") is not first

    def test_reset(self):
        first = factory.get_storage_adapter("s3")
        factory.reset_storage_adapter()

        assert factory.get_storage_adapter("s3") is not first

    def test_unknown_configured_provider(self, monkeypatch):
        monkeypatch.setattr(config, "CLOUD_STORAGE_PROVIDER", "dropbox")

        with pytest.raises(UnsupportedProviderError):
            factory.get_storage_adapter()

    def test_adapter_creation_is_lazy(self):
        """어댑터 생성 시 SDK 클라이언트는 만들지 않음"""
        adapter = factory.get_storage_adapter("s3")

        assert adapter._client is None
