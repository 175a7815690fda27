# backend/routes/uploads.py
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, UploadFile, File

from config import settings
from utils.uploads import save_upload

router = APIRouter(tags=["Uploads"])


@router.post("/upload")
def upload_image(image: Optional[UploadFile] = File(None)):
    url = save_upload(image, Path(settings.UPLOAD_DIR))
    return {"url": url}
