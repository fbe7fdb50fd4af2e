"""Storage access layer."""
from .user_repository import UserRepository, parse_user_id
