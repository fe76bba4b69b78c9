"""
dependencies.py
---------------
FastAPI dependency injection for authentication and authorisation.

Flow:
  1. OAuth2PasswordBearer extracts the Bearer token (optional: anonymous
     callers are allowed to reach public routes).
  2. get_request_context wraps the token and DB session in a RequestContext.
  3. Handlers validate their input, then call ctx.require(Action...) which
     resolves identity -> role -> decision once for the request.

The tenant scope comes from the membership tables, never from the token or
the request body.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.access.context import RequestContext
from jobboard.db.session import get_db

# tokenUrl must match the login endpoint path
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


async def get_request_context(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RequestContext:
    return RequestContext(db=db, token=token)


Context = Annotated[RequestContext, Depends(get_request_context)]
DB = Annotated[AsyncSession, Depends(get_db)]
