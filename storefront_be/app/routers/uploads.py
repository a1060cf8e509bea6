import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File

from app.schemas.upload import UploadOut
from app.utils.media import UploadRejected, delete_upload_file, save_upload_file
from app.utils.security import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.post("", response_model=UploadOut)
def upload_file(file: UploadFile = File(None)):
    try:
        stored = save_upload_file(file)
    except UploadRejected as e:
        logger.warning("Upload rejected: %s", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return UploadOut(**stored)


# ":path" lets names carrying separators reach the filename check instead of 404ing in routing
@router.delete("/{filename:path}")
def delete_upload(filename: str):
    try:
        removed = delete_upload_file(filename)
    except UploadRejected as e:
        logger.warning("Refused to delete upload %r: %s", filename, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    if not removed:
        raise HTTPException(status_code=404, detail="File not found")
    return {"success": True}
