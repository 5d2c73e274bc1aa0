# talentx/services/listing_store.py
"""
Static job / internship / company listings.

Everything here is read-only mock data filtered in memory. The public
coroutines sleep for a configurable amount of time so clients see the same
latency they would against a real listings API.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from talentx.core.config import settings
from talentx.models.listing import Company, JobListing, JobType, ListingFilters


def _days_ago(days: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()


MOCK_JOBS: List[JobListing] = [
    JobListing(
        id="1",
        title="Senior Frontend Engineer",
        company="Innovatech Solutions",
        company_logo="https://picsum.photos/seed/innovatech/100/100",
        location="San Francisco, CA",
        type=JobType.FULL_TIME,
        description="Join our dynamic team to build cutting-edge web applications using React, TypeScript, and GraphQL. Lead frontend development efforts and mentor junior engineers.",
        posted_date=_days_ago(2),
        salary_range="$150,000 - $180,000",
        skills=["React", "TypeScript", "GraphQL", "Node.js", "TailwindCSS", "Jest"],
    ),
    JobListing(
        id="2",
        title="Product Marketing Manager",
        company="MarketPro Inc.",
        company_logo="https://picsum.photos/seed/marketpro/100/100",
        location="New York, NY",
        type=JobType.FULL_TIME,
        description="Develop and execute marketing strategies for new product launches. Conduct market research and collaborate with sales and product teams.",
        posted_date=_days_ago(5),
        skills=["Marketing Strategy", "Product Launch", "Market Research", "SEO", "Content Marketing"],
    ),
    JobListing(
        id="3",
        title="UX/UI Designer (Contract)",
        company="Creative Visions Agency",
        company_logo="https://picsum.photos/seed/creativevisions/100/100",
        location="Remote",
        type=JobType.CONTRACT,
        description="Design intuitive and visually appealing user interfaces for web and mobile applications. Create wireframes, prototypes, and high-fidelity mockups.",
        posted_date=_days_ago(1),
        salary_range="$70 - $90 / hour",
        skills=["UX Design", "UI Design", "Figma", "Adobe XD", "Prototyping", "User Research"],
    ),
    JobListing(
        id="4",
        title="Data Science Intern",
        company="DataDriven Corp",
        company_logo="https://picsum.photos/seed/datadriven/100/100",
        location="Austin, TX",
        type=JobType.INTERNSHIP,
        description="Work on real-world data science projects, including data cleaning, analysis, and model building. Learn from experienced data scientists.",
        posted_date=_days_ago(7),
        skills=["Python", "R", "SQL", "Machine Learning", "Data Analysis", "Statistics"],
    ),
    JobListing(
        id="5",
        title="Backend Developer (Python/Django)",
        company="ScaleFast Ltd.",
        company_logo="https://picsum.photos/seed/scalefast/100/100",
        location="Remote",
        type=JobType.FULL_TIME,
        description="Design, develop, and maintain scalable backend services and APIs using Python and Django. Work with databases and cloud infrastructure.",
        posted_date=_days_ago(3),
        salary_range="$120,000 - $150,000",
        skills=["Python", "Django", "REST APIs", "PostgreSQL", "AWS", "Docker"],
    ),
    JobListing(
        id="6",
        title="Marketing Intern",
        company="GrowthHackers Co.",
        company_logo="https://picsum.photos/seed/growthhackers/100/100",
        location="Boston, MA (Hybrid)",
        type=JobType.INTERNSHIP,
        description="Assist the marketing team with social media campaigns, content creation, and market analysis. Gain hands-on experience in digital marketing.",
        posted_date=_days_ago(4),
        skills=["Social Media Marketing", "Content Creation", "Google Analytics", "SEO Basics"],
    ),
]

MOCK_INTERNSHIPS: List[JobListing] = [j for j in MOCK_JOBS if j.type == JobType.INTERNSHIP]
MOCK_NON_INTERNSHIPS: List[JobListing] = [j for j in MOCK_JOBS if j.type != JobType.INTERNSHIP]


def _company(cid: str, name: str, seed: str) -> Company:
    return Company(
        id=cid,
        name=name,
        logo_url=f"https://picsum.photos/seed/{seed}/100/100",
        active_listings=sum(1 for j in MOCK_JOBS if j.company == name),
    )


MOCK_COMPANIES: List[Company] = [
    _company("c1", "Innovatech Solutions", "innovatech"),
    _company("c2", "MarketPro Inc.", "marketpro"),
    _company("c3", "Creative Visions Agency", "creativevisions"),
    _company("c4", "DataDriven Corp", "datadriven"),
    _company("c5", "ScaleFast Ltd.", "scalefast"),
]


def _keyword_match(job: JobListing, keywords: str) -> bool:
    needle = keywords.lower()
    return (
        needle in job.title.lower()
        or needle in job.company.lower()
        or needle in job.description.lower()
        or any(needle in skill.lower() for skill in job.skills)
    )


def filter_listings(listings: Iterable[JobListing], filters: Optional[ListingFilters] = None) -> List[JobListing]:
    """
    Keyword (title/company/description/skills, OR), location substring and
    exact job type, combined with AND. Source order is preserved.
    """
    filters = filters or ListingFilters()
    out = []
    for job in listings:
        if filters.keywords and not _keyword_match(job, filters.keywords):
            continue
        if filters.location and filters.location.lower() not in job.location.lower():
            continue
        if filters.job_type and job.type != filters.job_type:
            continue
        out.append(job)
    return out


async def _simulate_latency(ms: int) -> None:
    if ms > 0:
        await asyncio.sleep(ms / 1000)


async def get_jobs(filters: Optional[ListingFilters] = None) -> List[JobListing]:
    await _simulate_latency(settings.LISTING_LATENCY_MS)
    return filter_listings(MOCK_NON_INTERNSHIPS, filters)


async def get_internships(filters: Optional[ListingFilters] = None) -> List[JobListing]:
    await _simulate_latency(settings.LISTING_LATENCY_MS)
    return filter_listings(MOCK_INTERNSHIPS, filters)


async def get_all_listings(filters: Optional[ListingFilters] = None) -> List[JobListing]:
    await _simulate_latency(settings.LISTING_LATENCY_MS)
    return filter_listings(MOCK_JOBS, filters)


async def get_featured_jobs(limit: int = 3) -> List[JobListing]:
    await _simulate_latency(settings.FEATURED_LATENCY_MS)
    return MOCK_NON_INTERNSHIPS[:limit]


async def get_featured_internships(limit: int = 2) -> List[JobListing]:
    await _simulate_latency(settings.FEATURED_LATENCY_MS)
    return MOCK_INTERNSHIPS[:limit]


async def get_featured_companies(limit: int = 4) -> List[Company]:
    await _simulate_latency(settings.FEATURED_LATENCY_MS)
    return MOCK_COMPANIES[:limit]
