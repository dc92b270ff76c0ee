"""Admin translation editor backend.

Lists, adds, updates and deletes remote translation rows and invalidates the
cached namespaces each write touches.
"""

from modules.translations.service import TranslationEditor

__all__ = ["TranslationEditor"]
