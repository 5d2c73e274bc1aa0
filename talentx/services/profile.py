# talentx/services/profile.py
"""
In-process profile dashboard state, one per signed-in account: resumes,
coding profiles, application history and the editable name/email.

Seeded with demo data the first time it is built. Exactly one resume is
primary whenever at least one exists.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from uuid import uuid4

from fastapi import Request

from talentx.models.profile import (
    ApplicationHistoryItem,
    CodingProfile,
    Platform,
    Profile,
    ResumeFile,
    User,
)

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 500
NEW_PROFILE_SUMMARY = "New Profile - Summary Pending"


class ResumeNotFoundError(LookupError):
    def __init__(self, resume_id: str):
        super().__init__(f"Resume {resume_id} not found")
        self.resume_id = resume_id


class EmptyResumeError(ValueError):
    pass


def _iso(days_ago: int = 0) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days_ago)).isoformat()


def _seed_resumes() -> List[ResumeFile]:
    return [
        ResumeFile(
            id="r1",
            name="Software_Engineer_Resume_v3.txt",
            upload_date=_iso(),
            is_primary=True,
            content="John Doe\nSoftware Engineer\nSkills: React, Node.js, TypeScript\nExperience: Tech Corp (2 years)",
        ),
        ResumeFile(
            id="r2",
            name="Project_Manager_Resume_OLD.txt",
            upload_date=_iso(10),
            is_primary=False,
            content="John Doe\nProject Manager\nSkills: Agile, Scrum, JIRA",
        ),
    ]


def _seed_coding_profiles() -> List[CodingProfile]:
    return [
        CodingProfile(platform="GitHub", username="johndoe", url="https://github.com/johndoe", summary="Contributions: 250+"),
        CodingProfile(platform="LeetCode", username="johndoe_lc", url="https://leetcode.com/johndoe_lc", summary="Solved: 150 Problems"),
    ]


def _seed_history() -> List[ApplicationHistoryItem]:
    return [
        ApplicationHistoryItem(job_id="1", job_title="Senior Frontend Engineer", company="Innovatech Solutions",
                               applied_date=_iso(5), status="Applied"),
        ApplicationHistoryItem(job_id="j2", job_title="UX Designer", company="Creative Designs",
                               applied_date=_iso(12), status="Interviewing"),
    ]


class ProfileStore:
    def __init__(self, seed: bool = True):
        self.resumes: List[ResumeFile] = _seed_resumes() if seed else []
        self.coding_profiles: List[CodingProfile] = _seed_coding_profiles() if seed else []
        self.application_history: List[ApplicationHistoryItem] = _seed_history() if seed else []
        self.name: Optional[str] = None
        self.email: Optional[str] = None

    def get_profile(self, user: User) -> Profile:
        merged = User(id=user.id, email=self.email or user.email, name=self.name or user.name)
        return Profile(
            user=merged,
            resumes=[r.model_copy() for r in self.resumes],
            coding_profiles=[p.model_copy() for p in self.coding_profiles],
            application_history=[a.model_copy() for a in self.application_history],
        )

    def update_info(self, name: Optional[str] = None, email: Optional[str] = None) -> None:
        if name is not None:
            self.name = name.strip() or None
        if email is not None:
            self.email = email.strip() or None
        logger.info("Saved user info: name=%s email=%s", self.name, self.email)

    def _find(self, resume_id: str) -> ResumeFile:
        for r in self.resumes:
            if r.id == resume_id:
                return r
        raise ResumeNotFoundError(resume_id)

    def add_resume(self, name: str, content: Optional[str]) -> ResumeFile:
        resume = ResumeFile(
            id=f"r{uuid4().hex[:12]}",
            name=name,
            upload_date=_iso(),
            is_primary=not self.resumes,
            content=content,
        )
        self.resumes.append(resume)
        return resume

    def set_primary(self, resume_id: str) -> ResumeFile:
        target = self._find(resume_id)
        for r in self.resumes:
            r.is_primary = r.id == target.id
        return target

    def delete_resume(self, resume_id: str) -> None:
        target = self._find(resume_id)
        self.resumes = [r for r in self.resumes if r.id != resume_id]
        if target.is_primary and self.resumes:
            self.resumes[0].is_primary = True

    def preview(self, resume_id: str) -> str:
        resume = self._find(resume_id)
        if not resume.content:
            raise EmptyResumeError("No content to preview. Please ensure the file was processed correctly.")
        return resume.content[:PREVIEW_CHARS]

    def primary_content(self) -> str:
        for r in self.resumes:
            if r.is_primary:
                return r.content or ""
        return ""

    def add_coding_profile(self, platform: Platform, username: str) -> CodingProfile:
        username = (username or "").strip()
        if not username:
            raise ValueError("Username is required.")
        profile = CodingProfile(
            platform=platform,
            username=username,
            url=f"https://example.com/{platform.lower()}/{username}",
            summary=NEW_PROFILE_SUMMARY,
        )
        self.coding_profiles.append(profile)
        return profile


class ProfileDirectory:
    """One ProfileStore per account, keyed by lower-cased email."""

    def __init__(self, seed: bool = True):
        self._seed = seed
        self._stores: Dict[str, ProfileStore] = {}

    def for_user(self, user: User) -> ProfileStore:
        key = user.email.strip().lower()
        store = self._stores.get(key)
        if store is None:
            store = ProfileStore(seed=self._seed)
            self._stores[key] = store
            logger.info("Created profile for %s", key)
        return store


def get_profile_directory(request: Request) -> ProfileDirectory:
    directory = getattr(request.app.state, "profiles", None)
    if directory is None:
        raise RuntimeError("ProfileDirectory not attached to the app")
    return directory
