"""Translation resolution feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for language selection and translation loading.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language used when nothing else resolves (default: en)
        I18N_LOCALES_DIR: Directory holding static YAML bundles (default: app/locales)
        I18N_LANGUAGES_TABLE: Remote table with supported languages
        I18N_TRANSLATIONS_TABLE: Remote table with translation overrides
        I18N_LANGUAGE_COOKIE: Cookie holding the selected language
        I18N_LANGUAGE_COOKIE_DAYS: Cookie lifetime in days (default: 365)
        I18N_REGISTRY_TIMEOUT_SECONDS: Timeout for the languages fetch (default: 5s)
    """

    default_language: str = Field(default="en", alias="I18N_DEFAULT_LANGUAGE")
    locales_dir: str = Field(default="", alias="I18N_LOCALES_DIR")
    languages_table: str = Field(default="cms_languages", alias="I18N_LANGUAGES_TABLE")
    translations_table: str = Field(
        default="cms_translations", alias="I18N_TRANSLATIONS_TABLE"
    )
    language_cookie: str = Field(
        default="kudosim_language", alias="I18N_LANGUAGE_COOKIE"
    )
    language_cookie_days: int = Field(default=365, alias="I18N_LANGUAGE_COOKIE_DAYS")
    registry_timeout_seconds: float = Field(
        default=5.0, alias="I18N_REGISTRY_TIMEOUT_SECONDS"
    )
