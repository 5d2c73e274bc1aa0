# talentx/api/v1/listings.py
from typing import List, Optional

from fastapi import APIRouter, Query

from talentx.models.listing import Company, JobListing, JobType, ListingFilters
from talentx.services import listing_store

router = APIRouter()


def _filters(keywords: Optional[str], location: Optional[str], job_type: Optional[JobType]) -> ListingFilters:
    return ListingFilters(keywords=keywords or None, location=location or None, job_type=job_type)


@router.get("/jobs", response_model=List[JobListing])
async def list_jobs(
    keywords: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[JobType] = None,
):
    return await listing_store.get_jobs(_filters(keywords, location, job_type))


@router.get("/internships", response_model=List[JobListing])
async def list_internships(
    keywords: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[JobType] = None,
):
    return await listing_store.get_internships(_filters(keywords, location, job_type))


@router.get("/listings", response_model=List[JobListing])
async def list_all(
    keywords: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[JobType] = None,
):
    return await listing_store.get_all_listings(_filters(keywords, location, job_type))


@router.get("/featured/jobs", response_model=List[JobListing])
async def featured_jobs(limit: int = Query(3, ge=0, le=50)):
    return await listing_store.get_featured_jobs(limit)


@router.get("/featured/internships", response_model=List[JobListing])
async def featured_internships(limit: int = Query(2, ge=0, le=50)):
    return await listing_store.get_featured_internships(limit)


@router.get("/featured/companies", response_model=List[Company])
async def featured_companies(limit: int = Query(4, ge=0, le=50)):
    return await listing_store.get_featured_companies(limit)


@router.get("/job-types", response_model=List[str])
async def job_types():
    return [t.value for t in JobType]
