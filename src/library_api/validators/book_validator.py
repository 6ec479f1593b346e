"""
书籍数据验证器
规则按声明顺序执行，只检查结构，不访问数据库
"""
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from library_api.models.book import Book

# 整个值必须匹配（fullmatch），前后不允许多余字符
ISBN_13_PATTERN = re.compile(r"\d{3}-\d{10}")


@dataclass(frozen=True)
class ValidationFailure:
    """单个字段的验证失败"""
    property_name: str
    error_message: str

    def to_dict(self) -> dict:
        return {"propertyName": self.property_name, "errorMessage": self.error_message}


def _is_valid_isbn(value: Optional[str]) -> bool:
    return value is not None and ISBN_13_PATTERN.fullmatch(value) is not None


def _is_not_empty(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


class BookValidator:
    """书籍验证器"""

    # (字段名, 取值函数, 判定函数, 错误信息)
    rules: List[Tuple[str, Callable[[Book], Optional[str]], Callable[[Optional[str]], bool], str]] = [
        ("Isbn", lambda book: book.isbn, _is_valid_isbn,
         "Value was not a valid ISBN-13"),
        ("Title", lambda book: book.title, _is_not_empty,
         "'Title' must not be empty."),
    ]

    def validate(self, book: Book) -> List[ValidationFailure]:
        """返回全部验证失败项，为空表示通过"""
        return [
            ValidationFailure(property_name, message)
            for property_name, getter, check, message in self.rules
            if not check(getter(book))
        ]
