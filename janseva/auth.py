"""
Request identity and admin access

Sign-in happens upstream; the identity provider forwards the signed-in user's
id in a header. Admin routes are guarded by a shared key from settings.
"""
import logging
import secrets

from fastapi import HTTPException, Request

from .config import settings

logger = logging.getLogger(__name__)

ADMIN_KEY_HEADER = "X-Admin-Key"


def get_current_user_id(request: Request) -> str:
    """Identity of the signed-in user; 401 when the request carries none"""
    user_id = request.headers.get(settings.user_id_header, "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Please sign in first")
    return user_id


def require_admin(request: Request) -> None:
    """Reject requests without the configured admin key"""
    provided = request.headers.get(ADMIN_KEY_HEADER, "")
    expected = settings.admin_api_key

    if not expected:
        logger.warning("Admin request rejected: ADMIN_API_KEY is not configured")
        raise HTTPException(status_code=403, detail="Admin access is not configured")

    if not provided or not secrets.compare_digest(provided.encode(), expected.encode()):
        raise HTTPException(status_code=403, detail="Invalid admin credentials")
