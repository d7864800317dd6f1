"""
API routes for catalog administration
"""
import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query

from ..auth import require_admin
from ..models.program import Program, ProgramKind
from ..services.catalog_service import CatalogService, get_catalog_service
from ..utils.validators import validate_program_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/programs", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/", response_model=List[Program])
async def list_all_programs(
    kind: Optional[ProgramKind] = Query(None, description="Only schemes or scholarships"),
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    List every program, including drafts and unpublished ones
    """
    try:
        return await catalog.list_programs(kind)

    except Exception as e:
        logger.error(f"Error listing programs for admin: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve programs: {str(e)}")


@router.post("/{kind}", response_model=Program, status_code=201)
async def create_program(
    kind: ProgramKind,
    payload: Dict[str, Any] = Body(..., description="Program document fields"),
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    Create a scheme or scholarship
    """
    try:
        errors = validate_program_payload(payload, kind)
        if errors:
            raise HTTPException(status_code=400, detail=f"Invalid {kind} data: {'; '.join(errors)}")

        return await catalog.create_program(kind, payload)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating {kind}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create {kind}: {str(e)}")


@router.put("/{kind}/{program_id}", response_model=Program)
async def update_program(
    kind: ProgramKind,
    program_id: str,
    changes: Dict[str, Any] = Body(..., description="Fields to change"),
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    Update some fields of a scheme or scholarship
    """
    try:
        # Only the fields being changed are validated
        errors = validate_program_payload(changes, kind, partial=True)
        if errors:
            raise HTTPException(status_code=400, detail=f"Invalid {kind} data: {'; '.join(errors)}")

        program = await catalog.update_program(kind, program_id, changes)

        if not program:
            raise HTTPException(status_code=404, detail=f"{kind.capitalize()} not found: {program_id}")

        return program

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating {kind} {program_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update {kind}: {str(e)}")


@router.delete("/{kind}/{program_id}")
async def delete_program(
    kind: ProgramKind,
    program_id: str,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    Permanently delete a scheme or scholarship
    """
    try:
        deleted = await catalog.delete_program(kind, program_id)

        if not deleted:
            raise HTTPException(status_code=404, detail=f"{kind.capitalize()} not found: {program_id}")

        return {"message": f"{kind.capitalize()} {program_id} deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting {kind} {program_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to delete {kind}: {str(e)}")


@router.post("/{kind}/{program_id}/toggle-status", response_model=Program)
async def toggle_program_status(
    kind: ProgramKind,
    program_id: str,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    Switch a program between Active and Draft
    """
    try:
        program = await catalog.toggle_status(kind, program_id)

        if not program:
            raise HTTPException(status_code=404, detail=f"{kind.capitalize()} not found: {program_id}")

        return program

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error toggling status of {kind} {program_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update {kind} status: {str(e)}")
