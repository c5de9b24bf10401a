"""
Database models package.
"""

from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User
from jobly.models.application import Application, ApplicationState

__all__ = ["Company", "Job", "User", "Application", "ApplicationState"]
