"""
路由层依赖的能力协议
"""
from typing import List, Optional, Protocol, runtime_checkable

from library_api.models.book import Book
from library_api.validators.book_validator import ValidationFailure


@runtime_checkable
class BookServiceProtocol(Protocol):
    """书籍服务协议，未找到属于正常结果：查询返回None，写操作返回False"""

    async def create(self, book: Book) -> bool:
        """创建书籍，ISBN已存在时返回False"""
        ...

    async def get_all(self) -> List[Book]:
        ...

    async def get_by_isbn(self, isbn: str) -> Optional[Book]:
        ...

    async def search_by_title(self, search_term: str) -> List[Book]:
        ...

    async def update(self, book: Book) -> bool:
        """替换全部可变字段，ISBN不存在时返回False"""
        ...

    async def delete(self, isbn: str) -> bool:
        ...


@runtime_checkable
class BookValidatorProtocol(Protocol):
    """书籍验证器协议，返回空列表表示通过"""

    def validate(self, book: Book) -> List[ValidationFailure]:
        ...
