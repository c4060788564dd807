import logging

from fastapi import APIRouter, HTTPException, status
from pymongo.errors import PyMongoError

from ...core.config import settings
from ...db.mongo import MongoConnectionManager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="애플리케이션 헬스체크")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/db", summary="MongoDB 연결 확인")
async def database_healthcheck() -> dict[str, str]:
    try:
        healthy = await MongoConnectionManager.ping()
    except PyMongoError as exc:
        logger.warning("MongoDB ping 실패: %s", exc)
        healthy = False
    if not healthy:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")
    return {"status": "ok", "database": settings.mongodb_db}
