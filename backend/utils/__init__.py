"""
Utils package for the invite backend
"""
from .helpers import (
    generate_random_string,
    generate_slug,
    build_invite_url,
    utc_now_iso,
)

__all__ = [
    'generate_random_string',
    'generate_slug',
    'build_invite_url',
    'utc_now_iso',
]
