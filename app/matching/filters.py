# app/matching/filters.py
from pydantic import BaseModel, Field


class MatchFilters(BaseModel):
    min_score: float = Field(0, ge=0, le=100, description="Minimum weighted score, in percent")
    job_type: list[str] = []
    location: list[str] = []
    experience_level: list[str] = []


def _contains_any(value: str | None, wanted: list[str]) -> bool:
    value = (value or "").lower()
    return any(w.lower() in value for w in wanted)


def _location_ok(location: str | None, wanted: list[str]) -> bool:
    location = (location or "").lower()
    return any(
        w.lower() in location or (w.lower() == "remote" and "remote" in location)
        for w in wanted
    )


def apply_filters(matches: list, filters: MatchFilters) -> list:
    """
    Keep matches passing every active filter category. Within a category any
    selected value is enough; an empty category does not restrict.
    """
    result = list(matches)
    if filters.min_score > 0:
        result = [m for m in result if m.weighted_score * 100 >= filters.min_score]
    if filters.job_type:
        result = [m for m in result if _contains_any(m.job.job_type, filters.job_type)]
    if filters.location:
        result = [m for m in result if _location_ok(m.job.location, filters.location)]
    if filters.experience_level:
        result = [m for m in result if _contains_any(m.job.experience_level, filters.experience_level)]
    return result


def filter_options(matches: list) -> dict[str, list[str]]:
    """Distinct non-empty values present in ``matches``, in first-seen order."""
    return {
        "job_types": list(dict.fromkeys(m.job.job_type for m in matches if m.job.job_type)),
        "locations": list(dict.fromkeys(m.job.location for m in matches if m.job.location)),
        "experience_levels": list(dict.fromkeys(m.job.experience_level for m in matches if m.job.experience_level)),
    }
