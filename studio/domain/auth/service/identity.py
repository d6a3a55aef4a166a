"""Identity service: resolves the active viewer and owns local signup state."""

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from studio.domain.auth.model.identity import Viewer, resolve_viewer
from studio.domain.auth.model.signup import SignupForm
from studio.domain.auth.model.user import User
from studio.domain.shared import storage_keys
from studio.domain.shared.error import StorageQuotaError
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier
from studio.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IdentityService(Service):
    """Tracks who the current viewer is.

    A real authenticated user always wins; when one is present any local
    pseudo-identity is cleared rather than merged.
    """

    _local_store: LocalStore
    _notifier: Notifier

    def current_viewer(self, auth_user: User | None) -> Viewer:
        if auth_user is not None:
            if self._local_store.get(storage_keys.SIGNUP_FLAG) is not None:
                logger.info("Clearing local signup state for user %s", auth_user.id)
                self.clear_local_signup()
            return resolve_viewer(auth_user, None)
        return resolve_viewer(None, self.load_local_signup())

    def load_local_signup(self) -> SignupForm | None:
        if not self._local_store.get(storage_keys.SIGNUP_FLAG):
            return None
        data = self._local_store.get(storage_keys.SIGNUP_DATA)
        if data is None:
            return SignupForm()
        try:
            return SignupForm.model_validate(data)
        except PydanticValidationError:
            logger.error("Discarding unreadable local signup data")
            return SignupForm()

    def record_local_signup(self, form: SignupForm) -> bool:
        """Validate and persist a local signup. Returns False if storage rejected it."""
        form.validate_all()
        try:
            self._local_store.set(storage_keys.SIGNUP_FLAG, True)
            self._local_store.set(storage_keys.SIGNUP_DATA, form.model_dump())
        except StorageQuotaError as e:
            logger.warning("Could not persist local signup: %s", e.message)
            self._notifier.error("Could not save your signup on this device")
            return False
        return True

    def clear_local_signup(self) -> None:
        self._local_store.remove(storage_keys.SIGNUP_FLAG)
        self._local_store.remove(storage_keys.SIGNUP_DATA)

    def logout(self) -> None:
        self.clear_local_signup()
        self._notifier.success("Successfully logged out")

    def load_profile(self, viewer: Viewer) -> dict[str, Any]:
        profile = self._local_store.get(storage_keys.profile_key(viewer.viewer_id))
        return profile if isinstance(profile, dict) else {}

    def save_profile(self, viewer: Viewer, profile: dict[str, Any]) -> dict[str, Any]:
        stamped = {**profile, "last_updated": datetime.now(UTC).isoformat()}
        try:
            self._local_store.set(storage_keys.profile_key(viewer.viewer_id), stamped)
        except StorageQuotaError as e:
            logger.warning("Could not persist profile: %s", e.message)
            self._notifier.error("Profile could not be saved on this device")
            return stamped
        self._notifier.success("Profile updated successfully")
        return stamped
