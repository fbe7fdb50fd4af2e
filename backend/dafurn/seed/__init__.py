# dafurn/seed/__init__.py
"""
Offline data provisioning.
Exports the seeding entry points used by `python -m dafurn.seed`.
"""
from .users import SAMPLE_USERS, seed_users, run, main
