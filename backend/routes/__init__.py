"""
Routes package for the invite API

Routes are organized by domain:
- health: Health check endpoints
- invites: Invite create/read/view/export endpoints
"""

from .health import router as health_router
from .invites import router as invites_router

__all__ = ['health_router', 'invites_router']
