"""
图书管理API - 基于ISBN的书籍CRUD服务
"""

__version__ = "1.0.0"
