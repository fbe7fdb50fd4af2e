# dafurn/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Error types shared by storage, HTTP and seeding code
"""
