"""
书籍模型
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

@dataclass
class Book:
    """书籍模型，ISBN为唯一业务标识"""
    isbn: Optional[str]
    title: Optional[str]
    author: Optional[str] = None
    page_count: int = 0
    short_description: Optional[str] = None
    release_date: Optional[date] = None

    def __repr__(self):
        return f"Book(isbn='{self.isbn}', title='{self.title}')"
