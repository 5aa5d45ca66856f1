from __future__ import annotations

from jobmatch.core import default_scorer
from jobmatch.pipeline import JobListing, JobQuery
from jobmatch.schemas import CandidateProfile, JobPosting, RankedJob


def build_jobs() -> list[JobPosting]:
    return [
        JobPosting(job_id="J-1", title="Python Developer", location="Milano", views=5, created_at="2024-01-01"),
        JobPosting(job_id="J-2", title="Data Engineer", description="python and spark", location="Roma", views=5, created_at="2024-03-01"),
        JobPosting(job_id="J-3", title="Designer", location="Milano", job_type="part-time", views=9),
        JobPosting(job_id="J-4", title="Python Lead", status="closed", views=100),
        JobPosting(
            job_id="J-5",
            title="Senior Python",
            location="Torino",
            created_at="2023-06-01",
            requirements={"min_experience": 10},
        ),
    ]


def test_listing_orders_by_views_then_recency_and_drops_inactive():
    listing = JobListing(scorer=default_scorer())

    page = listing.list_jobs(build_jobs())

    assert [job.job_id for job in page.jobs] == ["J-3", "J-2", "J-1", "J-5"]
    assert page.total == 4
    assert page.ranked is False
    assert not any(isinstance(job, RankedJob) for job in page.jobs)


def test_listing_filters():
    listing = JobListing(scorer=default_scorer())
    jobs = build_jobs()

    search = listing.list_jobs(jobs, query=JobQuery(search="PYTHON"))
    location = listing.list_jobs(jobs, query=JobQuery(location="milan"))
    job_type = listing.list_jobs(jobs, query=JobQuery(job_type="part-time"))

    assert [job.job_id for job in search.jobs] == ["J-2", "J-1", "J-5"]
    assert [job.job_id for job in location.jobs] == ["J-3", "J-1"]
    assert [job.job_id for job in job_type.jobs] == ["J-3"]


def test_listing_pagination_is_capped():
    listing = JobListing(scorer=default_scorer(), max_page_size=2)
    jobs = build_jobs()

    first = listing.list_jobs(jobs, query=JobQuery(page=1, page_size=10))
    second = listing.list_jobs(jobs, query=JobQuery(page=2, page_size=10))
    beyond = listing.list_jobs(jobs, query=JobQuery(page=5, page_size=2))

    assert first.page_size == 2
    assert [job.job_id for job in first.jobs] == ["J-3", "J-2"]
    assert [job.job_id for job in second.jobs] == ["J-1", "J-5"]
    assert beyond.jobs == []
    assert beyond.total == 4


def test_listing_ranks_page_for_candidates_only():
    listing = JobListing(scorer=default_scorer())
    candidate = CandidateProfile(candidate_id="C-1", years_of_experience=2)
    company = CandidateProfile(candidate_id="CO-1", user_type="company")

    ranked = listing.list_jobs(build_jobs(), candidate=candidate)
    unranked = listing.list_jobs(build_jobs(), candidate=company)

    assert ranked.ranked is True
    assert [job.job_id for job in ranked.jobs] == ["J-3", "J-2", "J-1", "J-5"]
    assert ranked.jobs[-1].match_score == 0.0
    assert all(isinstance(job, RankedJob) for job in ranked.jobs)
    assert unranked.ranked is False


def test_ranking_never_changes_page_membership():
    listing = JobListing(scorer=default_scorer(), max_page_size=2)
    candidate = CandidateProfile(candidate_id="C-1", years_of_experience=20)

    page = listing.list_jobs(build_jobs(), query=JobQuery(page=2, page_size=2), candidate=candidate)

    assert {job.job_id for job in page.jobs} == {"J-1", "J-5"}
