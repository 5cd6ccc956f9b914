"""
Utility helper functions for the invite backend
"""
import secrets
import string
from datetime import datetime, timezone

SLUG_ALPHABET = string.ascii_lowercase + string.digits


# ============ String Utilities ============

def generate_random_string(length: int = 32, alphabet: str = string.ascii_letters + string.digits) -> str:
    """Generate a random string drawn from alphabet"""
    return ''.join(secrets.choice(alphabet) for _ in range(length))


def generate_slug(length: int) -> str:
    """Short lowercase public identifier, not checked for uniqueness"""
    return generate_random_string(length, SLUG_ALPHABET)


def build_invite_url(frontend_url: str, slug: str) -> str:
    return f"{frontend_url.rstrip('/')}/invite/{slug}"


# ============ Time Utilities ============

def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
