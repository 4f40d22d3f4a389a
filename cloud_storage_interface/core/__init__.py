"""
Core 유틸리티
"""

from cloud_storage_interface.core.logging_config import setup_logger

__all__ = ["setup_logger"]
