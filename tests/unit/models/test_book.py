"""
Book模型单元测试
"""
import pytest
from datetime import date
from library_api.models.book import Book


@pytest.mark.unit
class TestBook:
    """Book模型测试类"""

    def test_book_creation(self):
        """测试Book对象创建"""
        book = Book(
            isbn="978-0132350884",
            title="Clean Code",
            author="Robert C. Martin",
            page_count=464,
            short_description="A handbook of agile software craftsmanship",
            release_date=date(2008, 8, 1)
        )

        assert book.isbn == "978-0132350884"
        assert book.title == "Clean Code"
        assert book.author == "Robert C. Martin"
        assert book.page_count == 464
        assert book.short_description == "A handbook of agile software craftsmanship"
        assert book.release_date == date(2008, 8, 1)

    def test_book_optional_fields_default(self):
        """测试可选字段默认值"""
        book = Book(isbn="978-0132350884", title="Clean Code")

        assert book.author is None
        assert book.page_count == 0
        assert book.short_description is None
        assert book.release_date is None

    def test_book_repr(self):
        """测试Book对象字符串表示"""
        book = Book(isbn="978-0132350884", title="Clean Code")

        assert repr(book) == "Book(isbn='978-0132350884', title='Clean Code')"

    def test_book_equality(self):
        """测试相同字段的Book对象相等"""
        book1 = Book(isbn="978-0132350884", title="Clean Code", page_count=464)
        book2 = Book(isbn="978-0132350884", title="Clean Code", page_count=464)

        assert book1 == book2
        book2.page_count = 69
        assert book1 != book2
