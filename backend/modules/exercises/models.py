"""
Exercise database model.
PRIVATE - do not import from outside this module.
"""
from sqlalchemy import Column, Date, Float, ForeignKey, String

from backend.core.database import Base
from backend.modules.users.models import generate_id


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String(24), primary_key=True, default=generate_id)
    user_id = Column("user", String(24), ForeignKey("users.id"), nullable=False, index=True)
    description = Column(String, nullable=False)
    duration = Column(Float, nullable=False)  # minutes
    date = Column(Date, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Exercise id={self.id} user={self.user_id} "
            f"description={self.description!r} duration={self.duration} date={self.date}>"
        )
