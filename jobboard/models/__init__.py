"""
models/__init__.py
------------------
Re-export all models so create_tables.py (and Alembic's env.py) can import
Base and discover all tables via a single import:

    from jobboard.models import Base
"""

from jobboard.db.base import Base
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.conversation import Conversation, ConversationMessage, SenderType
from jobboard.models.favorite import Favorite
from jobboard.models.job import Job, JobStatus
from jobboard.models.membership import AdminRole, AdminUser, MemberRole, OrganizationMember
from jobboard.models.organization import Organization
from jobboard.models.review import OrganizationReview
from jobboard.models.user import Applicant, User

__all__ = [
    "Base",
    "AdminRole",
    "AdminUser",
    "Applicant",
    "Application",
    "ApplicationStatus",
    "Conversation",
    "ConversationMessage",
    "Favorite",
    "Job",
    "JobStatus",
    "MemberRole",
    "Organization",
    "OrganizationMember",
    "OrganizationReview",
    "SenderType",
    "User",
]
