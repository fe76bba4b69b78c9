"""
services/user_service.py
------------------------
Business logic for sign-up, authentication and applicant profiles.

Sign-up only ever creates an applicant. Company roles are granted through
organization onboarding (organization_service) or team management
(member_service), never by the user themselves.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.logging import get_logger
from jobboard.core.security import hash_password, verify_password
from jobboard.models.user import Applicant, User
from jobboard.schemas.user import SignupRequest

logger = get_logger(__name__)


class UserService:

    @staticmethod
    async def signup(db: AsyncSession, data: SignupRequest) -> User:
        """
        Create the auth user and its applicant profile.
        Raises ValueError on duplicate email.
        """
        email = data.email.lower()
        user = User(email=email, hashed_password=hash_password(data.password))
        db.add(user)
        try:
            await db.flush()
        except IntegrityError:
            await db.rollback()
            raise ValueError(f"Email '{data.email}' is already registered")

        db.add(
            Applicant(
                id=user.id,
                display_name=data.display_name,
                email=email,
                phone=data.phone,
            )
        )
        await db.flush()
        await db.refresh(user)
        logger.info("Applicant signed up", user_id=user.id)
        return user

    @staticmethod
    async def create_account(db: AsyncSession, email: str, password: str) -> User:
        """Bare auth user with no profile (used for company admins)."""
        user = User(email=email.lower(), hashed_password=hash_password(password))
        db.add(user)
        await db.flush()
        return user

    @staticmethod
    async def authenticate(
        db: AsyncSession, email: str, password: str
    ) -> User | None:
        """
        Verify credentials and return the User if valid, else None.
        Email lookup is case-insensitive.
        """
        result = await db.execute(
            select(User).where(User.email == email.lower())
        )
        user = result.scalar_one_or_none()
        if user is None or not verify_password(password, user.hashed_password):
            return None
        return user

    @staticmethod
    async def get_applicant(db: AsyncSession, user_id: str) -> Applicant | None:
        result = await db.execute(select(Applicant).where(Applicant.id == user_id))
        return result.scalar_one_or_none()
