"""
File adapters package.
"""

from .shopping_list_writer import ShoppingListWriter

__all__ = ["ShoppingListWriter"]
