"""
业务服务层包
"""
from .book_service import BookService
from .protocols import BookServiceProtocol, BookValidatorProtocol

__all__ = ["BookService", "BookServiceProtocol", "BookValidatorProtocol"]
