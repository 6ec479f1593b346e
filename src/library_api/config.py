"""
应用配置
从环境变量读取（支持 .env 文件），所有字段均有默认值
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """应用配置项"""

    # 应用信息
    app_name: str = os.getenv("APP_NAME", "Library API")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # 服务监听
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    # 数据库文件路径，相对路径按当前工作目录解析
    database_path: str = os.getenv("LIBRARY_DATABASE_PATH", "data/library.db")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")


# 环境变量需在导入本模块前设置
settings = Settings()
