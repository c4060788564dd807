from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class RestaurantNotFound(HTTPException):
    def __init__(self, detail: str = "Restaurant not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ServerError(HTTPException):
    def __init__(self, detail: str = "Server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@asynccontextmanager
async def store_errors(operation: str) -> AsyncIterator[None]:
    """저장소 호출 중 발생한 예상치 못한 오류를 ServerError로 변환

    원인은 로그에만 남기고 응답에는 내부 정보를 노출하지 않는다.
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("저장소 작업 실패: %s", operation)
        raise ServerError() from exc
