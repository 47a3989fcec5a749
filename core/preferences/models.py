"""
SQLAlchemy ORM model for durable per-set preferences.
"""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Preference(Base):
    """
    A single stored flag, keyed by "<flag_name>_<set_id>".
    """
    __tablename__ = 'preferences'

    key = Column(String(255), primary_key=True, nullable=False)
    value = Column(String(50), nullable=False)  # "true" / "false"
    expires_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Preference({self.key}={self.value})>"
