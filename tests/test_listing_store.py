# tests/test_listing_store.py
import pytest

from talentx.models.listing import JobListing, JobType, ListingFilters
from talentx.services import listing_store
from talentx.services.listing_store import filter_listings


def _listing(id, title="Engineer", location="Remote", type=JobType.FULL_TIME, skills=None, description="Build things."):
    return JobListing(
        id=id,
        title=title,
        company="Acme",
        location=location,
        type=type,
        description=description,
        posted_date="2024-01-01T00:00:00+00:00",
        skills=skills or [],
    )


def test_keyword_matches_skill_tag_case_insensitively():
    listings = [
        _listing("a", skills=["React", "TypeScript"]),
        _listing("b", title="Accountant", skills=["Excel"], description="Ledgers."),
    ]
    out = filter_listings(listings, ListingFilters(keywords="react"))
    assert [j.id for j in out] == ["a"]


def test_keyword_matches_title_company_or_description():
    listings = [
        _listing("t", title="Django Developer"),
        _listing("d", description="Maintain our Django monolith."),
        _listing("n", title="Designer"),
    ]
    out = filter_listings(listings, ListingFilters(keywords="DJANGO"))
    assert [j.id for j in out] == ["t", "d"]
    assert [j.id for j in filter_listings(listings, ListingFilters(keywords="acme"))] == ["t", "d", "n"]


def test_location_and_type_combine_with_and():
    remote_intern = _listing("ri", location="Remote", type=JobType.INTERNSHIP)
    remote_full = _listing("rf", location="Remote", type=JobType.FULL_TIME)
    office_intern = _listing("oi", location="Austin, TX", type=JobType.INTERNSHIP)
    out = filter_listings(
        [remote_full, remote_intern, office_intern],
        ListingFilters(location="remote", job_type=JobType.INTERNSHIP),
    )
    assert [j.id for j in out] == ["ri"]


def test_no_filters_returns_everything_in_source_order():
    listings = [_listing(str(i)) for i in range(5)]
    assert [j.id for j in filter_listings(listings)] == ["0", "1", "2", "3", "4"]
    assert [j.id for j in filter_listings(listings, ListingFilters(keywords="", location=""))] == ["0", "1", "2", "3", "4"]


def test_location_is_substring_match():
    listings = [_listing("b", location="Boston, MA (Hybrid)"), _listing("s", location="San Francisco, CA")]
    assert [j.id for j in filter_listings(listings, ListingFilters(location="hybrid"))] == ["b"]


@pytest.mark.asyncio
async def test_jobs_and_internships_split_mock_data():
    jobs = await listing_store.get_jobs()
    internships = await listing_store.get_internships()
    assert jobs and internships
    assert all(j.type != JobType.INTERNSHIP for j in jobs)
    assert all(j.type == JobType.INTERNSHIP for j in internships)
    assert len(await listing_store.get_all_listings()) == len(jobs) + len(internships)


@pytest.mark.asyncio
async def test_get_jobs_applies_filters():
    jobs = await listing_store.get_jobs(ListingFilters(keywords="react"))
    assert [j.id for j in jobs] == ["1"]
    remote = await listing_store.get_jobs(ListingFilters(location="remote"))
    assert {j.id for j in remote} == {"3", "5"}


@pytest.mark.asyncio
async def test_featured_limits_and_company_counts():
    assert len(await listing_store.get_featured_jobs()) == 3
    assert len(await listing_store.get_featured_internships()) == 2
    companies = await listing_store.get_featured_companies()
    assert len(companies) == 4
    by_name = {c.name: c.active_listings for c in companies}
    assert by_name["Innovatech Solutions"] == 1
    assert len(await listing_store.get_featured_jobs(limit=1)) == 1
