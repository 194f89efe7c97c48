"""
User model for the users collection.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class User(BaseModel):
    """
    User document model for the MongoDB users collection.

    The bcrypt hash lives in the ``password`` field of the document.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="Unique email address")
    hashed_password: str = Field(..., alias="password", description="Bcrypt hashed password")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp",
    )

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        """Build a User from a raw MongoDB document."""
        doc = dict(doc)
        if doc.get("_id") is not None:
            doc["_id"] = str(doc["_id"])
        return cls.model_validate(doc)

    def to_document(self) -> dict:
        """Serialize for insertion, leaving ``_id`` to the store."""
        return self.model_dump(by_alias=True, exclude={"id"})
