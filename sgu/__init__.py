# sgu/__init__.py
from sgu.core.constants import APP_VERSION

__version__ = APP_VERSION
