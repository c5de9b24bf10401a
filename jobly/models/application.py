"""
Application database model.

Links a user to a job they are interested in. The composite primary key
(username, job_id) guarantees at most one application per pair.
"""

import enum
from sqlalchemy import Column, String, Integer, ForeignKey, Enum
from sqlalchemy.orm import relationship
from jobly.core.database import Base


class ApplicationState(str, enum.Enum):
    """
    Application state. Any state may move to any other.

    - INTERESTED: Saved for later
    - APPLIED: Application sent
    - ACCEPTED: Offer received
    - REJECTED: Turned down
    """
    INTERESTED = "interested"
    APPLIED = "applied"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @classmethod
    def values(cls):
        return [state.value for state in cls]


class Application(Base):
    """A user's application to a job."""
    __tablename__ = "applications"

    username = Column(
        String(25),
        ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True
    )
    job_id = Column(
        Integer,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True
    )

    # Stored as the lowercase value, e.g. 'accepted'; a CHECK constraint
    # rejects anything else on backends without native enums
    state = Column(
        Enum(
            ApplicationState,
            name="application_state",
            values_callable=lambda states: [s.value for s in states],
            create_constraint=True,
        ),
        default=ApplicationState.APPLIED,
        nullable=False
    )

    # Relationships
    user = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")

    def __repr__(self):
        return f"<Application(username='{self.username}', job_id={self.job_id}, state={self.state.value})>"
