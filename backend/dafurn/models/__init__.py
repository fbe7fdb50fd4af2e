# dafurn/models/__init__.py
"""
Database models module initialization.

Models exported:
- User: marketplace participant profile
"""
from .user import User
