"""Database models for WordMate."""
from sqlalchemy import Column, String, Text

from wordmate.models.base import Base, TimestampMixin


class KeyValue(Base, TimestampMixin):
    """One record of the key-value store."""

    __tablename__ = "key_values"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<KeyValue {self.key}>"
