from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .core.config import settings
from .core.logging import configure_logging
from .db import init
from .db.mongo import MongoConnectionManager

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 애플리케이션 시작 시 커넥션 미리 생성
    try:
        MongoConnectionManager.get_client()
        await init.ensure_indexes(MongoConnectionManager.get_database())
        logger.info("MongoDB 커넥션 초기화 완료 (%s 모드)", settings.environment)
    except Exception as exc:  # pragma: no cover - 초기 연결 실패 로깅
        logger.warning("초기 커넥션 생성 중 오류 발생: %s", exc)
    yield
    # 종료 시 커넥션 정리
    await MongoConnectionManager.close()


app = FastAPI(title=settings.project_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    return {"message": f"Welcome to the {settings.project_name}"}
