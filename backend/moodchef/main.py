# moodchef/main.py
# FastAPI 앱 초기화 및 라우터 설정
# 라우터는 각 기능별로 분리하여 관리

from __future__ import annotations

import logging
from asyncio import sleep
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moodchef.api.routes_catalog import router as catalog_router   # 무드/재료 선택지
from moodchef.api.routes_recipes import router as recipes_router   # 추천/목록/시드
from moodchef.core.config import settings
from moodchef.core.errors import MoodChefError
from moodchef.db.indexes import ensure_indexes
from moodchef.db.init import close_db, get_db, init_db
from moodchef.db.models.schemas import HealthOut

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="MoodChef - API", version="0.1.0")

# CORS: 모바일 앱/엑스포 개발 서버에서 호출
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 에러 응답은 앱 호환을 위해 {"error": "..."} 형태로 통일
@app.exception_handler(MoodChefError)
async def on_moodchef_error(request: Request, exc: MoodChefError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(StarletteHTTPException)
async def on_http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

@app.exception_handler(RequestValidationError)
async def on_validation_error(request: Request, exc: RequestValidationError):
    # 스키마 검증 실패(limit 범위 등)도 같은 형태로: "limit: Input should be ..."
    parts = []
    for e in exc.errors():
        loc = ".".join(str(p) for p in e.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return JSONResponse(status_code=422, content={"error": "; ".join(parts) or "Invalid request"})

@app.exception_handler(Exception)
async def on_unhandled_error(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

# 앱 시작/종료 이벤트 핸들러
@app.on_event("startup")
async def on_startup() -> None:
    # 1) DB 먼저 붙는다 (최대 DB_INIT_RETRIES회, 1초 간격)
    db = None
    for i in range(settings.DB_INIT_RETRIES):
        try:
            db = await init_db()
            log.info("db ready")
            break
        except Exception as e:
            log.warning("db init retry %d: %s", i + 1, e)
            await sleep(1.0)
    if db is None:
        log.error("db init failed after %d retries", settings.DB_INIT_RETRIES)
        return

    # 2) 인덱스 보장
    try:
        await ensure_indexes(db)
        log.info("indexes ensured")
    except Exception as e:
        log.warning("ensure_indexes failed: %s", e)

    log.info(
        "MoodChef API ready. endpoints: GET /api/health, GET /api/ingredients, GET /api/moods, "
        "GET /api/recipes, POST /api/get-recipes, POST /api/seed-recipes"
    )

@app.on_event("shutdown")
async def on_shutdown() -> None:
    # 몽고db 커넥션 정리
    await close_db()

@app.get("/api/health", response_model=HealthOut)
async def health():
    # DB 미연결이어도 API 자체는 살아있음을 알림
    ok = {
        "status": "OK",
        "message": "MoodChef API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "db": "skip",
    }
    try:
        db = get_db()
    except RuntimeError:
        return ok
    try:
        await db.command("ping")
        ok["db"] = "ok"
    except Exception as e:
        ok["db"] = f"error: {e}"
    return ok

# 라우터 prefix는 각 파일 내에서 정의함 , 중복 prefix 금지
app.include_router(catalog_router)
app.include_router(recipes_router)
