"""Session-cached hot-path content: hero texts and popup settings."""

from modules.content.schemas import DEFAULT_POPUP_SETTINGS, PopupSettings
from modules.content.service import ContentService

__all__ = ["ContentService", "PopupSettings", "DEFAULT_POPUP_SETTINGS"]
