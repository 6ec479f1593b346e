#!/usr/bin/env python3
"""
主应用入口
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .config import Settings, settings as default_settings
from .database import SqliteConnectionFactory, init_database
from .repositories.book_repository import BookRepository
from .routes.book_routes import create_book_router
from .services.book_service import BookService
from .validators.book_validator import BookValidator

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """配置日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _property_name(loc: tuple) -> str:
    """将请求体错误位置转换为字段名，如 ('body', 'pageCount') -> 'PageCount'"""
    # JSON解析错误的位置包含字符偏移量（int），不是字段名
    fields = [part for part in loc if isinstance(part, str) and part != "body"]
    if not fields:
        return ""
    name = fields[-1]
    return name[:1].upper() + name[1:]


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """请求体无法解析时返回400，格式与字段验证错误一致"""
    errors = [
        {"propertyName": _property_name(tuple(err.get("loc", ()))), "errorMessage": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.info(f"请求体解析失败: {request.method} {request.url.path}")
    return JSONResponse(status_code=400, content=errors)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """创建FastAPI应用，所有依赖在此显式组装"""
    settings = settings or default_settings

    connection_factory = SqliteConnectionFactory(settings.database_path)
    book_service = BookService(BookRepository(connection_factory))
    validator = BookValidator()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用生命周期"""
        logger.info("应用启动中...")
        await init_database(connection_factory)
        logger.info("数据库连接就绪")
        yield
        logger.info("应用关闭中...")

    app = FastAPI(
        title=settings.app_name,
        description="基于ISBN的书籍管理API",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # 注册路由
    app.include_router(create_book_router(book_service, validator))

    @app.get("/health")
    async def health_check():
        """健康检查接口"""
        async with connection_factory.connection() as db:
            await db.execute("SELECT 1")
        return {"status": "healthy", "database": "connected"}

    return app


configure_logging(default_settings.log_level)
app = create_app()


def run_server(host: str = default_settings.api_host, port: int = default_settings.api_port):
    """运行服务器"""
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
