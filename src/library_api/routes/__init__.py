"""
HTTP路由包
"""
from .book_routes import create_book_router

__all__ = ["create_book_router"]
