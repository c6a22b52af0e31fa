# sgu/core/__init__.py
