import logging
from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.pages import PageDetail, PageSummary
from app.services.pages_service import PagesService

logger = logging.getLogger(__name__)


def build_router(kind: str, get_service: Callable) -> APIRouter:
    """Routes for one page collection, e.g. /services and /services/{slug}."""
    router = APIRouter(prefix=f"/{kind}", tags=[kind])

    @router.get("", response_model=List[PageSummary])
    def list_pages(service: PagesService = Depends(get_service)):
        try:
            return service.list_pages()
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Unexpected error listing {kind}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to retrieve {kind}")

    @router.get("/{slug}", response_model=PageDetail)
    def get_page(slug: str, service: PagesService = Depends(get_service)):
        try:
            page = service.get_page(slug)
            if not page:
                raise HTTPException(status_code=404, detail="Page not found")
            return page
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Unexpected error retrieving {kind} page {slug}: {e}")
            raise HTTPException(status_code=500, detail="Failed to retrieve page")

    return router


services_router = build_router("services", deps.get_services_service)
projects_router = build_router("projects", deps.get_projects_service)
