"""
业务异常定义
"""

class LibraryApiException(Exception):
    """基础异常类"""
    pass

class DuplicateBookError(LibraryApiException):
    """重复书籍异常（ISBN已存在）"""

    def __init__(self, isbn: str):
        super().__init__(f"Book with ISBN {isbn} already exists")
        self.isbn = isbn
