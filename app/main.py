from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text

from app.core.config import settings
from app.core.cors import OriginAllowListMiddleware
from app.db.init_db import init_db
from app.db.session import engine
from app.routers import order_router, product_router

import uvicorn

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # 应用启动时的初始化
    logger.info("Starting application...")

    # 数据库连接检查并建表（商品目录始终需要）：失败只记录，请求时再返回 500
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        init_db(engine)
        logger.info("✅ Database connection successful")
    except Exception as e:
        logger.error("❌ Database connection failed: %s", e)

    if not settings.EMAIL_USER:
        logger.warning("⚠️  EMAIL_USER is not set, order notifications will fail")

    yield

    # 应用关闭时的清理
    logger.info("Shutting down application...")
    engine.dispose()

# 创建 FastAPI 应用
app = FastAPI(
    title="Order Intake API",
    description="接收购物车订单、保存订单并发送通知邮件",
    version="1.0.0",
    lifespan=lifespan
)

# 添加 CORS 中间件
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)
# 白名单以外的来源在进入任何路由前被拒绝（最外层）
app.add_middleware(
    OriginAllowListMiddleware,
    allowed_origins=settings.CORS_ALLOWED_ORIGINS,
)

# 注册路由
app.include_router(order_router.router)
app.include_router(product_router.router, prefix="/api")

# 全局异常处理
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation error: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors())
        }
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    logger.error(f"HTTP error: {exc.status_code} - {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.detail
        }
    )

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Internal server error"
        }
    )

# 健康检查端点
@app.get("/health")
async def health_check():
    """健康检查接口"""
    return {
        "status": "healthy",
        "service": "order-intake-service",
        "version": "1.0.0"
    }

@app.get("/", response_class=PlainTextResponse)
async def read_root():
    """存活检查"""
    if settings.ORDER_STORE_ENABLED:
        return "✅ Backend is running with the order store!"
    return "✅ Backend is running!"


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=True
    )
