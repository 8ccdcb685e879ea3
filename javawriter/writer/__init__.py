"""
Java source writer package.
"""

from .writer import JavaWriter

__all__ = ['JavaWriter']
