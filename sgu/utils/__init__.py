# sgu/utils/__init__.py
from .system_utils import SystemUtils

__all__ = ["SystemUtils"]
