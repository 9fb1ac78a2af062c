"""User preferences."""
import logging

from wordmate.models.word_models import UserSettings
from wordmate.services.storage_service import RecordStore, StorageKey

logger = logging.getLogger(__name__)


class SettingsService:
    """Loads and saves the userSettings record."""

    def __init__(self, records: RecordStore):
        self.records = records

    def load(self) -> UserSettings:
        """Get stored settings, or defaults when none are readable."""
        data = self.records.get_json(StorageKey.USER_SETTINGS, None, expected_type=dict)
        if data is None:
            return UserSettings()
        return UserSettings.from_dict(data)

    def save(self, user_settings: UserSettings) -> None:
        """Persist settings. Raises StorageError on failure."""
        self.records.set_json(StorageKey.USER_SETTINGS, user_settings.to_dict())
        logger.info(f"Settings saved: {user_settings}")

    def notifications_denied(self) -> UserSettings:
        """Turn off both reminders after the platform refused notifications."""
        user_settings = self.load()
        user_settings.daily_notification = False
        user_settings.quiz_reminder = False
        self.save(user_settings)
        return user_settings
