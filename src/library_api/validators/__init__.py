"""
请求数据验证包
"""
from .book_validator import BookValidator, ValidationFailure

__all__ = ["BookValidator", "ValidationFailure"]
