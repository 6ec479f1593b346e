"""
SQLite数据库连接管理
负责按需创建异步连接和初始化表结构
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)


class SqliteConnectionFactory:
    """SQLite连接工厂 - 每个工作单元获取一个独立连接"""

    def __init__(self, db_path: str):
        self.db_path = db_path

    async def create_connection(self) -> aiosqlite.Connection:
        """打开并返回一个新连接，调用方负责关闭"""
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = await aiosqlite.connect(self.db_path)
        conn.row_factory = aiosqlite.Row
        return conn

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """获取数据库连接的上下文管理器，退出时无论成功与否都会关闭连接"""
        conn = await self.create_connection()
        try:
            yield conn
        finally:
            await conn.close()


async def init_database(factory: SqliteConnectionFactory) -> None:
    """初始化数据库表结构"""
    async with factory.connection() as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS Books (
                Isbn TEXT PRIMARY KEY,
                Title TEXT NOT NULL,
                Author TEXT,
                ShortDescription TEXT,
                PageCount INTEGER,
                ReleaseDate TEXT
            )
        """)
        await db.commit()
    logger.info(f"数据库初始化完成: {factory.db_path}")
