"""
로깅 설정

설정의 `log_level`(환경 변수 LOG_LEVEL)을 루트 로거와 콘솔 핸들러에 적용합니다.
"""

from __future__ import annotations

import logging.config

from .config import settings


def configure_logging() -> None:
    level = settings.log_level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                },
            },
            "root": {"handlers": ["console"], "level": level},
        }
    )
