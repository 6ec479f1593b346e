"""
pytest配置文件，定义全局fixtures和测试配置
"""
import tempfile
from pathlib import Path
from typing import AsyncGenerator, Generator
import pytest
from fastapi.testclient import TestClient

from library_api.config import Settings
from library_api.database import SqliteConnectionFactory, init_database
from library_api.main import create_app
from library_api.repositories.book_repository import BookRepository
from tests.fixtures.sample_data import generate_book_data


@pytest.fixture
def temp_db_path() -> Generator[str, None, None]:
    """创建临时数据库文件路径"""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as temp_file:
        temp_path = temp_file.name
    yield temp_path
    Path(temp_path).unlink(missing_ok=True)


@pytest.fixture
def test_settings(temp_db_path: str) -> Settings:
    """指向临时数据库的配置"""
    return Settings(database_path=temp_db_path)


@pytest.fixture
async def connection_factory(temp_db_path: str) -> AsyncGenerator[SqliteConnectionFactory, None]:
    """已初始化表结构的连接工厂"""
    factory = SqliteConnectionFactory(temp_db_path)
    await init_database(factory)
    yield factory


@pytest.fixture
async def book_repository(connection_factory: SqliteConnectionFactory) -> BookRepository:
    """基于临时数据库的BookRepository"""
    return BookRepository(connection_factory)


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """创建FastAPI测试客户端（触发lifespan以初始化数据库）"""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def sample_book_data():
    """示例书籍数据"""
    return generate_book_data()


def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 集成测试"
    )
    config.addinivalue_line(
        "markers", "e2e: 端到端测试"
    )
