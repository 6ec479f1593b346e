"""
测试用的样本数据
"""
import random
from datetime import date
from typing import Dict, Any

from library_api.models.book import Book

# 样本书籍数据（请求体格式）
SAMPLE_BOOKS = [
    {
        "isbn": "978-0132350884",
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "pageCount": 464,
        "shortDescription": "A handbook of agile software craftsmanship",
        "releaseDate": "2008-08-01"
    },
    {
        "isbn": "978-0201633610",
        "title": "Design Patterns",
        "author": "Erich Gamma",
        "pageCount": 395,
        "shortDescription": "Elements of reusable object-oriented software",
        "releaseDate": "1994-10-31"
    },
    {
        "isbn": "978-0137081073",
        "title": "The Clean Coder",
        "author": "Robert C. Martin",
        "pageCount": 256,
        "shortDescription": "A code of conduct for professional programmers",
        "releaseDate": "2011-05-13"
    }
]

# 无效的ISBN用于测试
INVALID_ISBN = "INVALID"


def generate_isbn() -> str:
    """生成符合 ddd-dddddddddd 格式的随机ISBN"""
    return f"{random.randint(100, 999)}-{random.randint(1000000000, 2100999999)}"


def generate_book_data(title: str = "The Dirty Coder") -> Dict[str, Any]:
    """生成随机ISBN的书籍请求体"""
    return {
        "isbn": generate_isbn(),
        "title": title,
        "author": "Diego Romário",
        "pageCount": 420,
        "shortDescription": "The story of my life",
        "releaseDate": "2023-01-01"
    }


def generate_book(title: str = "The Dirty Coder") -> Book:
    """生成随机ISBN的Book对象"""
    return Book(
        isbn=generate_isbn(),
        title=title,
        author="Diego Romário",
        page_count=420,
        short_description="The story of my life",
        release_date=date(2023, 1, 1),
    )
