"""Data export, import and backup endpoints."""
import json
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from core.rate_limiter import limiter, RateLimits
from src.calendar_bc.snapshot.infrastructure.services import SnapshotService, SnapshotError
from adapters.http.api.calendar.dependencies import get_snapshot_service
from adapters.http.api.calendar.schemas import ImportRequest, ImportResponse, BackupResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Data"])


@router.get("/export")
def export_data(service: SnapshotService = Depends(get_snapshot_service)):
    """Download every event, emoji and setting as a JSON attachment."""
    body = json.dumps(service.export(), indent=2, ensure_ascii=False)
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={service.export_filename()}"},
    )


@router.post("/import", response_model=ImportResponse)
@limiter.limit(RateLimits.SNAPSHOT)
def import_data(
    request: Request,
    payload: ImportRequest,
    service: SnapshotService = Depends(get_snapshot_service),
):
    """Import a snapshot, replacing or merging with current events.

    The current data is backed up first.
    """
    try:
        result = service.import_snapshot(payload.importData, merge_mode=payload.mergeMode)
    except SnapshotError as e:
        logger.warning(f"Import rejected: {e}")
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})

    return ImportResponse(
        success=True,
        message="Import successful",
        events_imported=result.events_imported,
        emojis_restored=result.emojis_restored,
        backupFile=result.backup_file,
    )


@router.post("/backup", response_model=BackupResponse)
@limiter.limit(RateLimits.SNAPSHOT)
def create_backup(request: Request, service: SnapshotService = Depends(get_snapshot_service)):
    """Write a backup of the current data, keeping only the newest ones."""
    try:
        backup_file = service.create_backup()
    except SnapshotError as e:
        logger.error(str(e))
        return JSONResponse(status_code=500, content={"success": False, "error": "Backup failed"})

    return BackupResponse(success=True, message="Backup created", backupFile=backup_file.name)
