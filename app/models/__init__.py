"""
Database models package.
"""

from app.models.base import MongoDocument
from app.models.job import Job
from app.models.application import JobApplication
from app.models.recruiter import Recruiter

__all__ = ["MongoDocument", "Job", "JobApplication", "Recruiter"]
