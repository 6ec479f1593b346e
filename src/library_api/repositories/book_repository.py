"""
书籍数据访问层
"""
import sqlite3
from datetime import date
from typing import List, Optional

import aiosqlite

from library_api.database import SqliteConnectionFactory
from library_api.exceptions import DuplicateBookError
from library_api.models.book import Book

_COLUMNS = "Isbn, Title, Author, ShortDescription, PageCount, ReleaseDate"


def _escape_like(term: str) -> str:
    """转义LIKE通配符，使搜索词按字面匹配"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _row_to_book(row: aiosqlite.Row) -> Book:
    release_date = row["ReleaseDate"]
    return Book(
        isbn=row["Isbn"],
        title=row["Title"],
        author=row["Author"],
        page_count=row["PageCount"] if row["PageCount"] is not None else 0,
        short_description=row["ShortDescription"],
        release_date=date.fromisoformat(release_date) if release_date else None,
    )


class BookRepository:
    """书籍仓库类 - 每个方法对应一条参数化SQL语句"""

    def __init__(self, connection_factory: SqliteConnectionFactory):
        self.connection_factory = connection_factory

    async def create(self, book: Book) -> None:
        """插入书籍，ISBN冲突时抛出DuplicateBookError"""
        query = f"""
            INSERT INTO Books ({_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?)
        """
        params = (
            book.isbn, book.title, book.author, book.short_description,
            book.page_count,
            book.release_date.isoformat() if book.release_date else None,
        )
        async with self.connection_factory.connection() as db:
            try:
                await db.execute(query, params)
            except sqlite3.IntegrityError as e:
                raise DuplicateBookError(book.isbn) from e
            await db.commit()

    async def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """根据ISBN获取书籍"""
        async with self.connection_factory.connection() as db:
            cursor = await db.execute(
                f"SELECT {_COLUMNS} FROM Books WHERE Isbn = ? LIMIT 1",
                (isbn,)
            )
            row = await cursor.fetchone()
        return _row_to_book(row) if row else None

    async def get_all(self) -> List[Book]:
        """获取所有书籍"""
        async with self.connection_factory.connection() as db:
            cursor = await db.execute(f"SELECT {_COLUMNS} FROM Books")
            rows = await cursor.fetchall()
        return [_row_to_book(row) for row in rows]

    async def search_by_title(self, title_keyword: str) -> List[Book]:
        """根据标题搜索书籍（子串匹配，ASCII不区分大小写）"""
        async with self.connection_factory.connection() as db:
            cursor = await db.execute(
                f"SELECT {_COLUMNS} FROM Books WHERE Title LIKE ? ESCAPE '\\'",
                (f"%{_escape_like(title_keyword)}%",)
            )
            rows = await cursor.fetchall()
        return [_row_to_book(row) for row in rows]

    async def update(self, book: Book) -> bool:
        """更新书籍全部可变字段，返回是否有记录被更新"""
        query = """
            UPDATE Books
            SET Title = ?, Author = ?, ShortDescription = ?,
                PageCount = ?, ReleaseDate = ?
            WHERE Isbn = ?
        """
        params = (
            book.title, book.author, book.short_description, book.page_count,
            book.release_date.isoformat() if book.release_date else None,
            book.isbn,
        )
        async with self.connection_factory.connection() as db:
            cursor = await db.execute(query, params)
            updated = cursor.rowcount > 0
            await db.commit()
        return updated

    async def delete(self, isbn: str) -> bool:
        """删除书籍，返回是否有记录被删除"""
        async with self.connection_factory.connection() as db:
            cursor = await db.execute("DELETE FROM Books WHERE Isbn = ?", (isbn,))
            deleted = cursor.rowcount > 0
            await db.commit()
        return deleted
