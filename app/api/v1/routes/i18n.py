from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Request, Response
from pydantic import BaseModel, Field

from infrastructure.cache import CookiePreferenceStore
from infrastructure.logging import get_module_logger
from infrastructure.services import LanguageResolverDep, TranslationServiceDep

router = APIRouter(prefix="/i18n", tags=["Translations"])
logger = get_module_logger()


class LanguageChangeRequest(BaseModel):
    code: str = Field(..., min_length=1, json_schema_extra={"example": "de"})


def _request_language(
    request: Request,
    i18n: TranslationServiceDep,
    resolver: LanguageResolverDep,
    accept_language: Optional[str],
) -> str:
    cookie = request.cookies.get(i18n.registry.cookie_name)
    supported = [lang.code for lang in i18n.languages]
    return resolver.resolve(
        supported,
        cookie_value=cookie,
        accept_language=accept_language,
        default=i18n.registry.default_language,
    )


@router.get("/languages")
def list_languages(
    request: Request,
    i18n: TranslationServiceDep,
    resolver: LanguageResolverDep,
    accept_language: Optional[str] = Header(default=None),
):
    """Selectable languages and the language this visitor gets."""
    return {
        "languages": [lang.to_dict() for lang in i18n.languages],
        "active": _request_language(request, i18n, resolver, accept_language),
        "default": i18n.registry.default_language,
    }


@router.put("/language")
def change_language(
    body: LanguageChangeRequest,
    request: Request,
    response: Response,
    i18n: TranslationServiceDep,
):
    """Persist the visitor's language choice in the language cookie."""
    if not i18n.is_supported(body.code):
        raise HTTPException(status_code=400, detail=f"Unsupported language: {body.code}")

    preferences = CookiePreferenceStore(request.cookies, response)
    preferences.set(
        i18n.registry.cookie_name,
        body.code,
        max_age_days=i18n.registry.cookie_days,
    )
    logger.info("visitor_language_changed", language=body.code)
    return {"language": body.code}


@router.get("/bundles/{language}/{namespace}")
async def get_bundle(language: str, namespace: str, i18n: TranslationServiceDep):
    """Resolved key/text map of one namespace in one language."""
    if not (
        i18n.is_supported(language) or language in i18n.static_bundle.languages()
    ):
        raise HTTPException(status_code=404, detail=f"Unknown language: {language}")

    resources, state = await i18n.get_bundle(language, namespace)
    return {
        "language": language,
        "namespace": namespace,
        "resources": resources,
        "source": state.sources.get(namespace),
        "error": state.has_error,
    }


@router.get("/translate")
def translate(
    request: Request,
    key: str,
    i18n: TranslationServiceDep,
    resolver: LanguageResolverDep,
    namespace: Optional[str] = None,
    language: Optional[str] = None,
    accept_language: Optional[str] = Header(default=None),
):
    """Translate one key; extra query parameters fill ``{{placeholders}}``."""
    language = language or _request_language(request, i18n, resolver, accept_language)
    reserved = {"key", "namespace", "language"}
    variables = {k: v for k, v in request.query_params.items() if k not in reserved}
    return {
        "key": key,
        "language": language,
        "text": i18n.t(key, namespace=namespace, language=language, **variables),
    }
