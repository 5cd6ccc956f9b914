"""
FastAPI dependencies for the invite routes
"""
from fastapi import HTTPException, Request

from services.invites import InviteStore
from .config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_invite_store(request: Request) -> InviteStore:
    return request.app.state.invite_store


def require_slug(slug: str) -> str:
    """Path slug, matched exactly; blank slugs are rejected"""
    if not slug.strip():
        raise HTTPException(status_code=400, detail="Missing slug")
    return slug
