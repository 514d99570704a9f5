"""Profile domain service."""

import base64
import logging
import mimetypes
from dataclasses import replace
from pathlib import Path
from typing import Optional

from tallybook.database.base import Backend
from tallybook.database.mappers import profile_from_storage, profile_to_storage
from tallybook.domain.entities import AuthUser, Profile
from tallybook.domain.errors import ValidationError

logger = logging.getLogger(__name__)


def file_to_data_uri(path: Path) -> str:
    """Encode a file as a base64 data URI."""
    mime_type, _ = mimetypes.guess_type(str(path))
    payload = base64.b64encode(Path(path).read_bytes()).decode("ascii")
    return f"data:{mime_type or 'application/octet-stream'};base64,{payload}"


class ProfileService:
    """Service for the signed-in user's profile."""

    def __init__(self, db: Backend, user: AuthUser):
        """Initialize profile service.

        Args:
            db: Backend instance
            user: Auth identity the profile belongs to
        """
        self.db = db
        self.user = user
        self.profile: Optional[Profile] = None

    def load(self) -> Optional[Profile]:
        """Load the profile row.

        Returns:
            The profile, or None if the backend has no row for the user
        """
        row = self.db.select_profile(self.user.id)
        if row is None:
            logger.error("No profile row for user %s", self.user.id)
            self.profile = None
            return None
        self.profile = profile_from_storage(row, self.user)
        return self.profile

    def update(self, profile: Profile) -> Profile:
        """Replace the editable profile fields.

        Raises:
            ValidationError: If the VAT rate is negative
            NotFoundError: If the profile row does not exist
            WriteError: If the backend rejects the update
        """
        if profile.vat_rate < 0:
            raise ValidationError(f"VAT rate cannot be negative, got {profile.vat_rate}")
        row = self.db.update_profile(self.user.id, profile_to_storage(profile))
        self.profile = profile_from_storage(row, self.user)
        return self.profile

    def set_avatar_from_file(self, path: Path) -> Profile:
        """Store an image file as the avatar, embedded as a data URI."""
        current = self.profile or self.load()
        if current is None:
            current = Profile(id=self.user.id, email=self.user.email)
        mime_type, _ = mimetypes.guess_type(str(path))
        if not mime_type or not mime_type.startswith("image/"):
            raise ValidationError(f"Avatar must be an image file: {path}")
        return self.update(replace(current, avatar=file_to_data_uri(path)))

