# talentx/api/v1/files.py
"""
Upload -> plain text. Only PDF and TXT are accepted; the type check happens
before the body is parsed.
"""

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from talentx.core.config import settings
from talentx.services.file_text import FileReadError, UnsupportedFileTypeError, extract_text

router = APIRouter()


class ExtractedText(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    filename: str
    content_type: str
    text: str


async def read_upload_text(file: UploadFile) -> str:
    """Shared by the extract endpoint and profile resume uploads; raises HTTPException."""
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")
    try:
        return await extract_text(content, file.content_type or "")
    except UnsupportedFileTypeError as exc:
        raise HTTPException(status_code=415, detail=str(exc))
    except FileReadError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/files/extract-text", response_model=ExtractedText)
async def extract_uploaded_text(file: UploadFile = File(...)):
    text = await read_upload_text(file)
    return ExtractedText(filename=file.filename or "", content_type=file.content_type or "", text=text)
