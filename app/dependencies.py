# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated, Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.exceptions import MessagingUnavailableError
from lib.database import get_session_factory


def get_db_session() -> Iterator[Session]:
    """
    Yield a messaging database session.

    Raises:
        MessagingUnavailableError: If DATABASE_URL isn't configured
    """
    factory = get_session_factory()
    if factory is None:
        raise MessagingUnavailableError()
    with factory() as session:
        yield session


# Type alias for dependency injection
DbSessionDep = Annotated[Session, Depends(get_db_session)]
