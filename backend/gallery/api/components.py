"""
Component catalog endpoints
Flow: Request -> Validation -> Catalog (database or static registry) -> Response
"""

from typing import AsyncGenerator, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.config.settings import get_settings
from gallery.core.auth import get_current_admin, require_database_catalog
from gallery.core.database import get_db, request_session
from gallery.core.exceptions import GalleryException
from gallery.core.logging import get_logger
from gallery.models.user import User
from gallery.schemas.component import (
    CategoryResponse,
    ComponentListResponse,
    ComponentResponse,
    CopyResponse,
    CreateComponentRequest,
    CreateVersionRequest,
    SortOrder,
    TagResponse,
    UpdateComponentRequest,
    VersionResponse,
)
from gallery.services.component_service import ComponentService
from gallery.services.static_catalog_service import StaticCatalogService
from gallery.services.version_service import ComponentVersionService

logger = get_logger(__name__)

router = APIRouter()

Catalog = Union[ComponentService, StaticCatalogService]


async def get_catalog(request: Request) -> AsyncGenerator[Catalog, None]:
    """Pick the catalog backend configured for this process."""
    if get_settings().CATALOG_SOURCE == "static":
        yield StaticCatalogService()
        return

    async with request_session(request) as db:
        yield ComponentService(db)


def _internal_error(action: str, e: Exception) -> HTTPException:
    logger.error("Catalog request failed", action=action, error=str(e), exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"An error occurred while trying to {action}"
    )


@router.get("/", response_model=ComponentListResponse)
async def list_components(
    search: Optional[str] = Query(None, description="Substring of name or tag"),
    category: Optional[str] = Query(None, description="Category filter; 'all' disables"),
    tag: Optional[str] = Query(None, description="Exact tag filter"),
    sort: SortOrder = Query("newest", description="newest | popular | copies | name"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Page size"),
    catalog: Catalog = Depends(get_catalog)
):
    """List gallery components"""
    try:
        items, total = await catalog.list_components(
            page=page,
            page_size=page_size,
            search=search,
            category=category,
            tag=tag,
            sort=sort
        )
        return ComponentListResponse(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
            has_next=page * page_size < total,
            has_prev=page > 1
        )
    except Exception as e:
        raise _internal_error("list components", e)


@router.get("/categories", response_model=CategoryResponse)
async def get_categories(catalog: Catalog = Depends(get_catalog)):
    """Categories with component counts"""
    try:
        counts = await catalog.get_categories()
        return CategoryResponse(categories=list(counts.keys()), category_counts=counts)
    except Exception as e:
        raise _internal_error("list categories", e)


@router.get("/tags", response_model=TagResponse)
async def get_tags(catalog: Catalog = Depends(get_catalog)):
    """Tags with component counts"""
    try:
        counts = await catalog.get_tags()
        return TagResponse(tags=list(counts.keys()), tag_counts=counts)
    except Exception as e:
        raise _internal_error("list tags", e)


@router.get("/{component_id}", response_model=ComponentResponse)
async def get_component(component_id: str, catalog: Catalog = Depends(get_catalog)):
    """Component detail, including source code"""
    try:
        return await catalog.get_component(component_id)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("get component", e)


@router.post(
    "/",
    response_model=ComponentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_database_catalog)],
)
async def create_component(
    data: CreateComponentRequest,
    catalog: Catalog = Depends(get_catalog),
    admin: User = Depends(get_current_admin)
):
    """Create a component (admin only)"""
    try:
        return await catalog.create_component(data)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("create component", e)


@router.put(
    "/{component_id}",
    response_model=ComponentResponse,
    dependencies=[Depends(require_database_catalog)],
)
async def update_component(
    component_id: str,
    data: UpdateComponentRequest,
    catalog: Catalog = Depends(get_catalog),
    admin: User = Depends(get_current_admin)
):
    """Update a component (admin only)"""
    try:
        return await catalog.update_component(component_id, data)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("update component", e)


@router.delete("/{component_id}", dependencies=[Depends(require_database_catalog)])
async def delete_component(
    component_id: str,
    catalog: Catalog = Depends(get_catalog),
    admin: User = Depends(get_current_admin)
):
    """Delete a component with its favorites and versions (admin only)"""
    try:
        await catalog.delete_component(component_id)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"message": "Component deleted", "id": component_id}
        )
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("delete component", e)


@router.post("/{component_id}/view", response_model=ComponentResponse)
async def record_view(component_id: str, catalog: Catalog = Depends(get_catalog)):
    """Count a preview of the component"""
    try:
        return await catalog.record_view(component_id)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("record view", e)


@router.post("/{component_id}/copy", response_model=CopyResponse)
async def record_copy(component_id: str, catalog: Catalog = Depends(get_catalog)):
    """Count a copy and return the code to put on the clipboard"""
    try:
        return await catalog.record_copy(component_id)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("record copy", e)


@router.get(
    "/{component_id}/versions",
    response_model=List[VersionResponse],
    dependencies=[Depends(require_database_catalog)],
)
async def list_versions(component_id: str, db: AsyncSession = Depends(get_db)):
    """Version history of a component"""
    try:
        return await ComponentVersionService(db).list_versions(component_id)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("list versions", e)


@router.post(
    "/{component_id}/versions",
    response_model=VersionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_database_catalog)],
)
async def create_version(
    component_id: str,
    data: CreateVersionRequest,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(get_current_admin)
):
    """Snapshot a component's code (admin only)"""
    try:
        return await ComponentVersionService(db).create_version(component_id, data)
    except GalleryException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise _internal_error("create version", e)
