from typing import Optional

from fastapi import APIRouter

from api.v1.routes.errors import raise_for_result
from infrastructure.services import ContentServiceDep
from modules.content import PopupSettings

router = APIRouter(tags=["Content"])


@router.get("/content/hero")
async def get_hero(content: ContentServiceDep):
    return {"translations": await content.get_hero_translations()}


@router.get("/content/popup")
async def get_popup(content: ContentServiceDep, language: Optional[str] = None):
    settings = await content.get_popup_settings()
    payload = settings.model_dump()
    if language:
        texts = settings.texts_for(language)
        payload["texts"] = texts.model_dump() if texts else None
    return payload


@router.put("/admin/popup")
async def save_popup(body: PopupSettings, content: ContentServiceDep):
    result = await content.save_popup_settings(body)
    raise_for_result(result)
    return {"saved": True}
