"""FastAPI 앱 진입점"""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

from app.api import admin, capacity, customers, notices, orders, settlements

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.database_configured:
        log.warning("database_not_configured", msg="재고 조회는 기본값, 쓰기 요청은 실패합니다")
    yield


app = FastAPI(
    title="Dosirak Server",
    description="도시락 주문/정산 관리 - 주간 주문 폼, 관리자 대시보드, 날짜별 재고",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """모든 오류 응답은 {"error": 메시지}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "입력값이 올바르지 않습니다."
    if errors:
        field = ".".join(str(p) for p in errors[0].get("loc", ()) if p not in ("body", "query", "path"))
        if field:
            message = f"{message} ({field})"
    return JSONResponse(status_code=400, content={"error": message})


app.include_router(capacity.router)
app.include_router(orders.router)
app.include_router(customers.router)
app.include_router(settlements.router)
app.include_router(admin.router)
app.include_router(notices.router)


@app.get("/health")
def health():
    return {"status": "ok"}
