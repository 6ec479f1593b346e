"""
数据访问层包
"""
from .book_repository import BookRepository

__all__ = ["BookRepository"]
