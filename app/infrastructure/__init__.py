"""Infrastructure modules for the translation service.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings, RetrySettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and error classification
- resilience: Retry with exponential backoff
- clients: Hosted table clients (Supabase / PostgREST)
- cache: Session cache and preference stores
- i18n: Translation resolution and caching
- services: Dependency injection services (SettingsDep, TranslationServiceDep, get_settings)
"""
