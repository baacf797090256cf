from types import SimpleNamespace

from app.matching.filters import MatchFilters, apply_filters, filter_options


def _match(score, job_type="Full-time", location="Remote", level="Senior", title="Job"):
    job = SimpleNamespace(title=title, job_type=job_type, location=location, experience_level=level)
    return SimpleNamespace(weighted_score=score, job=job)


MATCHES = [
    _match(0.82, "Full-time", "San Francisco, CA", "Senior", "a"),
    _match(0.50, "full-time", "Remote", "Mid-level", "b"),
    _match(0.49, "Full-time", "Remote - US", "Entry-level", "c"),
    _match(0.70, "Contract", "Boston, MA", "Senior", "d"),
    _match(0.90, None, None, None, "e"),
]


def titles(result):
    return [m.job.title for m in result]


def test_no_filters_keeps_everything():
    assert titles(apply_filters(MATCHES, MatchFilters())) == ["a", "b", "c", "d", "e"]


def test_min_score_and_job_type_are_conjunctive():
    result = apply_filters(MATCHES, MatchFilters(min_score=50, job_type=["Full-time"]))
    assert titles(result) == ["a", "b"]
    for m in result:
        assert m.weighted_score * 100 >= 50
        assert "full-time" in m.job.job_type.lower()


def test_values_within_category_are_disjunctive():
    result = apply_filters(MATCHES, MatchFilters(experience_level=["senior", "entry"]))
    assert titles(result) == ["a", "c", "d"]


def test_remote_location():
    assert titles(apply_filters(MATCHES, MatchFilters(location=["Remote"]))) == ["b", "c"]
    assert titles(apply_filters(MATCHES, MatchFilters(location=["boston", "remote"]))) == ["b", "c", "d"]


def test_missing_job_fields_never_match_a_selected_value():
    assert "e" not in titles(apply_filters(MATCHES, MatchFilters(job_type=["contract", "full"])))


def test_filter_options_distinct_in_order():
    opts = filter_options(MATCHES)
    assert opts["job_types"] == ["Full-time", "full-time", "Contract"]
    assert opts["locations"] == ["San Francisco, CA", "Remote", "Remote - US", "Boston, MA"]
    assert opts["experience_levels"] == ["Senior", "Mid-level", "Entry-level"]
