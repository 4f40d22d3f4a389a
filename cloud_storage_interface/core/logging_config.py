"""
로깅 설정 및 유틸리티
"""

import sys
from loguru import logger
from cloud_storage_interface.config import config


def setup_logger(module_name: str = "cloud-storage-interface"):
    """
    로거 설정

    기존 sink를 모두 제거하고 다시 구성하므로 애플리케이션 진입점에서
    명시적으로 한 번 호출한다. 패키지 import만으로는 호출되지 않는다.

    Args:
        module_name: 모듈 이름 (로그 파일명에 사용)
    """
    # 기본 핸들러 제거
    logger.remove()

    console_level = config.LOG_LEVEL or ("DEBUG" if config.DEBUG else "INFO")

    # 콘솔 출력
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=console_level.upper(),
        colorize=True
    )

    # 파일 출력은 LOGS_DIR이 설정된 경우만
    if config.LOGS_DIR is None:
        return logger

    log_file = config.LOGS_DIR / f"{module_name}.log"
    logger.add(
        log_file,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        retention="30 days",
        compression="zip"
    )

    # 에러 로그 (ERROR 이상)
    error_log_file = config.LOGS_DIR / f"{module_name}_error.log"
    logger.add(
        error_log_file,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="ERROR",
        rotation="10 MB",
        retention="90 days",
        compression="zip"
    )

    return logger
