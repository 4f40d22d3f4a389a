"""
설정 모듈
"""

from cloud_storage_interface.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestConfig,
    config,
)

__all__ = [
    "Config",
    "DevelopmentConfig",
    "ProductionConfig",
    "TestConfig",
    "config",
]
