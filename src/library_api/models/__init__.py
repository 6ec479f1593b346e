"""
数据模型包
"""
from .book import Book

__all__ = ["Book"]
