# talentx/api/v1/profile.py
"""
Profile dashboard. Every route requires a signed-in session.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from talentx.api.v1.auth import get_current_user
from talentx.api.v1.files import read_upload_text
from talentx.models.analysis import AnalysisInputError, AnalysisRequest, AnalysisResult, AnalysisTask
from talentx.models.profile import CodingProfile, Platform, Profile, ResumeFile, User
from talentx.services.analysis.pipeline import run_analysis
from talentx.services.profile import (
    EmptyResumeError,
    ProfileDirectory,
    ProfileStore,
    ResumeNotFoundError,
    get_profile_directory,
)

router = APIRouter(prefix="/profile")

NO_RESUME_TEXT = "Please select a resume with content or paste resume text into the text area to get suggestions."


class InfoIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class CodingProfileIn(BaseModel):
    platform: Platform
    username: str


class SuggestionsIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_text: Optional[str] = None


class PreviewOut(BaseModel):
    id: str
    preview: str


def get_profile_store(
    user: User = Depends(get_current_user),
    directory: ProfileDirectory = Depends(get_profile_directory),
) -> ProfileStore:
    return directory.for_user(user)


@router.get("", response_model=Profile)
async def get_profile(user: User = Depends(get_current_user), store: ProfileStore = Depends(get_profile_store)):
    return store.get_profile(user)


@router.put("/info", response_model=Profile)
async def update_info(payload: InfoIn, user: User = Depends(get_current_user), store: ProfileStore = Depends(get_profile_store)):
    if payload.email is not None and payload.email.strip() and "@" not in payload.email:
        raise HTTPException(status_code=400, detail="Please enter a valid email address.")
    store.update_info(name=payload.name, email=payload.email)
    return store.get_profile(user)


@router.post("/resumes", response_model=ResumeFile, status_code=201)
async def upload_resume(
    file: UploadFile = File(...),
    user: User = Depends(get_current_user),
    store: ProfileStore = Depends(get_profile_store),
):
    content = await read_upload_text(file)
    return store.add_resume(file.filename or "resume", content)


@router.post("/resumes/{resume_id}/primary", response_model=ResumeFile)
async def set_primary(resume_id: str, user: User = Depends(get_current_user), store: ProfileStore = Depends(get_profile_store)):
    try:
        return store.set_primary(resume_id)
    except ResumeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.delete("/resumes/{resume_id}", status_code=204)
async def delete_resume(resume_id: str, user: User = Depends(get_current_user), store: ProfileStore = Depends(get_profile_store)):
    try:
        store.delete_resume(resume_id)
    except ResumeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.get("/resumes/{resume_id}/preview", response_model=PreviewOut)
async def preview_resume(resume_id: str, user: User = Depends(get_current_user), store: ProfileStore = Depends(get_profile_store)):
    try:
        return PreviewOut(id=resume_id, preview=store.preview(resume_id))
    except ResumeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except EmptyResumeError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/coding-profiles", response_model=CodingProfile, status_code=201)
async def add_coding_profile(
    payload: CodingProfileIn,
    user: User = Depends(get_current_user),
    store: ProfileStore = Depends(get_profile_store),
):
    try:
        return store.add_coding_profile(payload.platform, payload.username)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/ai-suggestions", response_model=AnalysisResult)
async def ai_suggestions(
    payload: SuggestionsIn,
    user: User = Depends(get_current_user),
    store: ProfileStore = Depends(get_profile_store),
):
    text = (payload.resume_text or "").strip() or store.primary_content()
    req = AnalysisRequest(task=AnalysisTask.RESUME_SUGGESTIONS, primary_text=text)
    try:
        req.validate_inputs()
    except AnalysisInputError:
        raise HTTPException(status_code=400, detail=NO_RESUME_TEXT)
    return await run_analysis(req)
