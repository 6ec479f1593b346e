"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_BOOKS,
    INVALID_ISBN,
    generate_isbn,
    generate_book,
    generate_book_data
)

__all__ = [
    "SAMPLE_BOOKS",
    "INVALID_ISBN",
    "generate_isbn",
    "generate_book",
    "generate_book_data"
]
