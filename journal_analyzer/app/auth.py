# journal_analyzer/app/auth.py
"""
Bearer token authentication.

Session issuance lives outside this service; callers present a token that
was configured in API_TOKENS together with its role.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from journal_analyzer.core.config import load_api_tokens

logger = logging.getLogger(__name__)


def _extract_bearer(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_user(authorization: Optional[str] = Header(None)) -> str:
    """Return the caller's role ("user" or "admin"), 401 when unauthenticated."""
    token = _extract_bearer(authorization)
    role = load_api_tokens().get(token) if token else None
    if role is None:
        logger.warning("Rejected request with missing or unknown token")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return role


async def require_admin(role: str = Depends(require_user)) -> str:
    if role != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return role
