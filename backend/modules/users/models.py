"""
User database model.
PRIVATE - do not import from outside this module.
"""
import uuid

from sqlalchemy import Column, String

from backend.core.database import Base


def generate_id() -> str:
    """Opaque 24-character hex identifier"""
    return uuid.uuid4().hex[:24]


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=generate_id)
    username = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
