"""
테스트 설정 및 픽스처
"""

import os
import pytest
import tempfile
import shutil
from pathlib import Path

# 테스트 환경 설정 - 모든 import 이전에 설정
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("LOGS_DIR", None)

from cloud_storage_interface.factory import reset_storage_adapter


CLOUD_ENV_VARS = [
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_CONFIG_FILE",
    "AWS_SHARED_CREDENTIALS_FILE",
    "GOOGLE_APPLICATION_CREDENTIALS",
]


@pytest.fixture(autouse=True)
def clean_cloud_env(monkeypatch):
    """실제 클라우드 자격 증명이 테스트에 섞이지 않도록 제거"""
    for name in CLOUD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    reset_storage_adapter()


@pytest.fixture(scope="function")
def temp_dir():
    """임시 디렉토리 생성"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_file(temp_dir):
    """업로드용 샘플 파일"""
    path = temp_dir / "avatar.png"
    path.write_bytes(b"\x89PNG fake image bytes")
    return path

