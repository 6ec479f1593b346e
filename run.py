#!/usr/bin/env python3
"""
启动脚本 - 图书管理API
使用方法: uv run python run.py
"""

import logging
import uvicorn

from library_api.config import settings

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
)

# 设置特定模块的日志级别
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)

if __name__ == "__main__":
    logging.info("=" * 60)
    logging.info(f"启动 {settings.app_name} v{settings.app_version}")
    logging.info(f"数据库: {settings.database_path}")
    logging.info("=" * 60)

    uvicorn.run(
        "library_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        reload_dirs=["src"],
        log_level=settings.log_level.lower(),
    )
