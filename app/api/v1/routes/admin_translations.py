from typing import Optional

from fastapi import APIRouter, status

from api.v1.routes.errors import raise_for_result
from infrastructure.services import TranslationEditorDep
from modules.translations.schemas import (
    CreateTranslationRequest,
    TranslationListResponse,
    UpdateTranslationRequest,
)

router = APIRouter(prefix="/admin/translations", tags=["Admin"])


@router.get("", response_model=TranslationListResponse)
async def list_translations(
    editor: TranslationEditorDep,
    namespace: Optional[str] = None,
    language: Optional[str] = None,
):
    result = await editor.list_translations(namespace=namespace, language=language)
    raise_for_result(result)
    records = result.data or []
    return TranslationListResponse(
        translations=records,
        namespaces=editor.namespaces_in(records),
        count=len(records),
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_translation(body: CreateTranslationRequest, editor: TranslationEditorDep):
    result = await editor.add_translation(body)
    raise_for_result(result)
    return {"created": result.data}


@router.put("")
async def update_translation(body: UpdateTranslationRequest, editor: TranslationEditorDep):
    result = await editor.update_translation(body)
    raise_for_result(result)
    return {"updated": result.data}


@router.delete("/{key}")
async def delete_translation(
    key: str, editor: TranslationEditorDep, namespace: Optional[str] = None
):
    result = await editor.delete_translation(key, namespace=namespace)
    raise_for_result(result)
    return {"deleted": len(result.rows)}
