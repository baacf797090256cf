import pytest

from app.matching.explain import Explanation, build_explanation
from app.matching.scorer import weighted_score

NEUTRAL = {"skills": 0.5, "experience": 0.5, "interests": 0.5}


def test_substring_overlap_in_both_directions():
    exp = build_explanation(["React", "Python"], ["React.js", "SQL"], NEUTRAL)
    assert exp.matched_skills == ["React"]
    assert exp.missing_skills == ["SQL"]

    exp = build_explanation(["react.js"], ["React"], NEUTRAL)
    assert exp.matched_skills == ["react.js"]
    assert exp.missing_skills == []


def test_tags_and_weighted_score():
    scores = {"skills": 0.8, "experience": 0.5, "interests": 0.2}
    exp = build_explanation([], [], scores)
    assert exp.strength_areas == ["Strong skill alignment"]
    assert exp.improvement_areas == ["Consider if interests align"]
    assert weighted_score(scores) == pytest.approx(0.59)


def test_threshold_edges():
    exp = build_explanation([], [], {"skills": 0.7, "experience": 0.4, "interests": 0.39})
    assert exp.strength_areas == ["Strong skill alignment"]
    assert exp.improvement_areas == ["Consider if interests align"]

    exp = build_explanation([], [], {"skills": 0.1, "experience": 0.9, "interests": 0.75})
    assert exp.strength_areas == ["Relevant experience", "Great interest match"]
    assert exp.improvement_areas == ["Skills gap to address"]


def test_neutral_band_has_no_tags():
    exp = build_explanation(["a"], ["b"], {"skills": 0.4, "experience": 0.55, "interests": 0.6999})
    assert exp.strength_areas == []
    assert exp.improvement_areas == []


def test_caps():
    user = [f"skill{i}" for i in range(20)]
    job = [f"skill{i}" for i in range(15)] + [f"other{i}" for i in range(9)]
    exp = build_explanation(user, job, NEUTRAL)
    assert len(exp.matched_skills) == 10
    assert exp.matched_skills[0] == "skill0"
    assert exp.missing_skills == [f"other{i}" for i in range(5)]


def test_dict_form_uses_stored_keys():
    exp = build_explanation(["Go"], ["Go", "Rust"], {"skills": 0.9, "experience": 0.1, "interests": 0.5})
    data = exp.to_dict()
    assert data == {
        "matchedSkills": ["Go"],
        "missingSkills": ["Rust"],
        "strengthAreas": ["Strong skill alignment"],
        "improvementAreas": ["Experience building needed"],
    }
    assert Explanation.from_dict(data) == exp
    assert Explanation.from_dict(None) == Explanation()
