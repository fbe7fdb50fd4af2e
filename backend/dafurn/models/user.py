# dafurn/models/user.py
"""
Database model for users.
Represents a marketplace participant profile with a rating.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    The only persisted entity. Records are created by the seeding command
    (or individually through the repository), mutated only through the
    rating update and removed by id or in bulk.

    Constraints:
    - Email must be unique across all users (unique index)
    - Rating is always numeric and defaults to 0
    - created_at/updated_at are maintained by the ORM
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key, assigned on creation and never changed
    username = fields.CharField(max_length=256)  # Display name (required, not unique)
    avatar = fields.CharField(max_length=1024, null=True)  # Avatar image URL (optional)
    bio = fields.TextField(null=True)  # Free-form profile text (optional)
    rating = fields.FloatField(default=0)  # Marketplace rating, no range enforced
    email = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Contact email (required, unique)
    created_at = fields.DatetimeField(auto_now_add=True)  # Set once on creation
    updated_at = fields.DatetimeField(auto_now=True)  # Refreshed on every save

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

    def __str__(self) -> str:
        return f"{self.username} <{self.email}>"
