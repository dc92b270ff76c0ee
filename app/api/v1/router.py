from fastapi import APIRouter

from api.v1.routes.admin_translations import router as admin_translations_router
from api.v1.routes.content import router as content_router
from api.v1.routes.i18n import router as i18n_router

router = APIRouter()
router.include_router(i18n_router)
router.include_router(admin_translations_router)
router.include_router(content_router)
