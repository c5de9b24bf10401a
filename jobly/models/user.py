"""
User model for authentication and job applications.

Users are identified by their username; the password column only ever
holds a bcrypt hash.
"""

from sqlalchemy import Column, String, Text, Boolean
from sqlalchemy.orm import relationship
from jobly.core.database import Base


class User(Base):
    """
    A registered job seeker (or admin).
    """
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)

    # bcrypt hash, never the plain password
    password = Column(Text, nullable=False)

    # User profile
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False, index=True)

    is_admin = Column(Boolean, default=False, nullable=False)

    # Relationships; rows are removed by the FK cascade when a user is deleted
    applications = relationship(
        "Application",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Application.job_id",
    )

    @property
    def job_ids(self):
        """Ids of the jobs this user applied for, ascending."""
        return [application.job_id for application in self.applications]

    def __repr__(self):
        return f"<User(username='{self.username}', email='{self.email}', is_admin={self.is_admin})>"
