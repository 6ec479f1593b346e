"""
书籍业务服务层
"""
import logging
from typing import List, Optional

from library_api.repositories.book_repository import BookRepository
from library_api.models.book import Book
from library_api.exceptions import DuplicateBookError

logger = logging.getLogger(__name__)


class BookService:
    """书籍服务类"""

    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def create(self, book: Book) -> bool:
        """创建书籍，ISBN已存在时返回False"""
        # 由主键约束判定重复，避免先查后写的竞态
        try:
            await self.book_repository.create(book)
        except DuplicateBookError:
            logger.warning(f"书籍ISBN {book.isbn} 已存在，跳过插入: {book.title}")
            return False
        logger.info(f"书籍创建成功: {book.isbn}")
        return True

    async def get_all(self) -> List[Book]:
        """获取所有书籍"""
        return await self.book_repository.get_all()

    async def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """根据ISBN获取书籍，不存在时返回None"""
        return await self.book_repository.get_by_isbn(isbn)

    async def search_by_title(self, search_term: str) -> List[Book]:
        """根据标题搜索书籍"""
        return await self.book_repository.search_by_title(search_term)

    async def update(self, book: Book) -> bool:
        """更新书籍，不存在时返回False"""
        updated = await self.book_repository.update(book)
        if updated:
            logger.info(f"书籍更新成功: {book.isbn}")
        return updated

    async def delete(self, isbn: str) -> bool:
        """删除书籍，不存在时返回False"""
        deleted = await self.book_repository.delete(isbn)
        if deleted:
            logger.info(f"书籍删除成功: {isbn}")
        return deleted
