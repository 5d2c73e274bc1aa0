# talentx/models/profile.py
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Platform = Literal["LeetCode", "CodeChef", "HackerRank", "GitHub"]
ApplicationStatus = Literal["Applied", "Interviewing", "Offer", "Rejected"]

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(BaseModel):
    model_config = _CAMEL

    id: str
    email: str
    name: Optional[str] = None


class AuthState(BaseModel):
    model_config = _CAMEL

    is_authenticated: bool = False
    user: Optional[User] = None
    token: Optional[str] = None


class ResumeFile(BaseModel):
    model_config = _CAMEL

    id: str
    name: str
    upload_date: str
    is_primary: bool = False
    content: Optional[str] = None


class CodingProfile(BaseModel):
    model_config = _CAMEL

    platform: Platform
    username: str
    url: str
    summary: Optional[str] = None


class ApplicationHistoryItem(BaseModel):
    model_config = _CAMEL

    job_id: str
    job_title: str
    company: str
    applied_date: str
    status: ApplicationStatus


class Profile(BaseModel):
    model_config = _CAMEL

    user: User
    resumes: List[ResumeFile] = Field(default_factory=list)
    coding_profiles: List[CodingProfile] = Field(default_factory=list)
    application_history: List[ApplicationHistoryItem] = Field(default_factory=list)
