"""
Profile builder.

`create_url` and `gravatar` are the collaborators; `build_profile` only wires
the user's fields into them and returns what they give back.
"""

from __future__ import annotations

import hashlib
import logging

from slugify import slugify

from .config import AppSettings
from .models import Profile, User
from .rules import GRAVATAR_BASE_URL

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def create_url(name: str, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    return f"{settings.url.rstrip('/')}/users/{slugify(name)}"


def gravatar(email: str) -> str:
    # Gravatar keys avatars by the MD5 of the normalized email.
    email_md5 = hashlib.md5(_normalize_email(email).encode("utf-8")).hexdigest()  # nosec - public hash
    return f"{GRAVATAR_BASE_URL}/{email_md5}"


def build_profile(name: str, email: str, site: str) -> Profile:
    user = User(name=name, email=email, site=site)
    profile = Profile(
        user=user,
        profile_url=create_url(user.name),
        avatar_url=gravatar(user.email),
    )
    logger.info("Built profile for %s: %s", user.name, profile.profile_url)
    return profile
