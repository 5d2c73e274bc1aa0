# talentx/models/listing.py
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    TEMPORARY = "Temporary"
    INTERNSHIP = "Internship"


class JobListing(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    title: str
    company: str
    company_logo: Optional[str] = None
    location: str
    type: JobType
    description: str
    posted_date: str  # ISO-8601
    salary_range: Optional[str] = None
    skills: List[str] = Field(default_factory=list)


class Company(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    logo_url: str
    active_listings: int = 0


class ListingFilters(BaseModel):
    """Optional search filters; an empty value matches everything."""
    keywords: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None
