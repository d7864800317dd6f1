"""
API routes for the public scheme and scholarship listings
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from ..models.program import Program, ProgramKind
from ..services.catalog_service import CatalogService, filter_listing, get_catalog_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/programs", tags=["programs"])


@router.get("/", response_model=List[Program])
async def list_programs(
    kind: Optional[ProgramKind] = Query(None, description="Only schemes or scholarships"),
    status: str = Query("live", description="Listing tab: live, upcoming or always-open"),
    category: Optional[str] = Query(None, description="Browsing category"),
    search: Optional[str] = Query(None, description="Keyword in name, description or department"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of programs to return"),
    offset: int = Query(0, ge=0, description="Number of programs to skip"),
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    List published programs, filtered the way the public pages filter them
    """
    try:
        programs = await catalog.list_programs(kind)
        listed = filter_listing(programs, status_tab=status, nav_category=category, search=search)

        # Apply pagination
        return listed[offset:offset + limit]

    except Exception as e:
        logger.error(f"Error listing programs: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve programs: {str(e)}")


@router.get("/{kind}/{program_id}", response_model=Program)
async def get_program(
    kind: ProgramKind,
    program_id: str,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    Get a published program by ID
    """
    try:
        program = await catalog.get_program(kind, program_id)

        if not program or not program.is_published:
            raise HTTPException(status_code=404, detail=f"{kind.capitalize()} not found: {program_id}")

        return program

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching {kind} {program_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve {kind}: {str(e)}")
