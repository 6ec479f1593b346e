#!/usr/bin/env python3
"""
书籍管理路由
"""
from datetime import date
from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..models.book import Book
from ..services.protocols import BookServiceProtocol, BookValidatorProtocol
from ..validators.book_validator import ValidationFailure

logger = logging.getLogger(__name__)

BASE_ROUTE = "/books"
DUPLICATE_ISBN_MESSAGE = "A book with this ISBN-13 already exists"


class BookPayload(BaseModel):
    """书籍请求/响应体"""
    model_config = ConfigDict(populate_by_name=True)

    isbn: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    # 与数据库INTEGER及原有int字段范围一致
    page_count: int = Field(0, alias="pageCount", ge=-2**31, le=2**31 - 1)
    short_description: Optional[str] = Field(None, alias="shortDescription")
    release_date: Optional[date] = Field(None, alias="releaseDate")

    def to_book(self) -> Book:
        return Book(
            isbn=self.isbn,
            title=self.title,
            author=self.author,
            page_count=self.page_count,
            short_description=self.short_description,
            release_date=self.release_date,
        )

    @classmethod
    def from_book(cls, book: Book) -> "BookPayload":
        return cls(
            isbn=book.isbn,
            title=book.title,
            author=book.author,
            page_count=book.page_count,
            short_description=book.short_description,
            release_date=book.release_date,
        )


def book_to_json(book: Book) -> dict:
    return BookPayload.from_book(book).model_dump(mode="json", by_alias=True)


def validation_failed(failures: List[ValidationFailure]) -> JSONResponse:
    return JSONResponse(status_code=400, content=[f.to_dict() for f in failures])


def create_book_router(
    book_service: BookServiceProtocol,
    validator: BookValidatorProtocol,
) -> APIRouter:
    """创建书籍路由，服务与验证器由调用方显式传入"""
    book_router = APIRouter(prefix=BASE_ROUTE, tags=["books"])

    @book_router.post("", status_code=201)
    async def create_book(request: BookPayload):
        """创建新书籍"""
        book = request.to_book()
        failures = validator.validate(book)
        if failures:
            return validation_failed(failures)

        try:
            created = await book_service.create(book)
        except Exception as e:
            logger.error(f"创建书籍失败: {e}")
            raise HTTPException(status_code=500, detail="Internal Server Error")

        if not created:
            return validation_failed([ValidationFailure("Isbn", DUPLICATE_ISBN_MESSAGE)])

        return JSONResponse(
            status_code=201,
            content=book_to_json(book),
            headers={"Location": f"{BASE_ROUTE}/{book.isbn}"},
        )

    @book_router.get("")
    async def get_books(search_term: Optional[str] = Query(None, alias="searchTerm")):
        """获取书籍列表，提供非空searchTerm时按标题搜索"""
        try:
            if search_term is not None and search_term.strip():
                books = await book_service.search_by_title(search_term)
            else:
                books = await book_service.get_all()
        except Exception as e:
            logger.error(f"获取书籍列表失败: {e}")
            raise HTTPException(status_code=500, detail="Internal Server Error")

        return JSONResponse(content=[book_to_json(book) for book in books])

    @book_router.get("/{isbn}")
    async def get_book(isbn: str):
        """获取单本书籍"""
        try:
            book = await book_service.get_by_isbn(isbn)
        except Exception as e:
            logger.error(f"获取书籍详情失败: {e}")
            raise HTTPException(status_code=500, detail="Internal Server Error")

        if book is None:
            return Response(status_code=404)
        return JSONResponse(content=book_to_json(book))

    @book_router.put("/{isbn}")
    async def update_book(isbn: str, request: BookPayload):
        """更新书籍信息，路径中的ISBN覆盖请求体中的ISBN"""
        book = request.to_book()
        book.isbn = isbn
        failures = validator.validate(book)
        if failures:
            return validation_failed(failures)

        try:
            updated = await book_service.update(book)
        except Exception as e:
            logger.error(f"更新书籍失败: {e}")
            raise HTTPException(status_code=500, detail="Internal Server Error")

        if not updated:
            return Response(status_code=404)
        return JSONResponse(content=book_to_json(book))

    @book_router.delete("/{isbn}")
    async def delete_book(isbn: str):
        """删除书籍"""
        try:
            deleted = await book_service.delete(isbn)
        except Exception as e:
            logger.error(f"删除书籍失败: {e}")
            raise HTTPException(status_code=500, detail="Internal Server Error")

        return Response(status_code=204 if deleted else 404)

    return book_router
