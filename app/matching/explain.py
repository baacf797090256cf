# app/matching/explain.py
from dataclasses import dataclass, field

STRONG = 0.7
WEAK = 0.4
MAX_MATCHED = 10
MAX_MISSING = 5

# facet -> (tag when score >= STRONG, tag when score < WEAK)
TAGS = {
    "skills": ("Strong skill alignment", "Skills gap to address"),
    "experience": ("Relevant experience", "Experience building needed"),
    "interests": ("Great interest match", "Consider if interests align"),
}


@dataclass
class Explanation:
    matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    strength_areas: list[str] = field(default_factory=list)
    improvement_areas: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "matchedSkills": self.matched_skills,
            "missingSkills": self.missing_skills,
            "strengthAreas": self.strength_areas,
            "improvementAreas": self.improvement_areas,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "Explanation":
        data = data or {}
        return cls(
            matched_skills=list(data.get("matchedSkills") or []),
            missing_skills=list(data.get("missingSkills") or []),
            strength_areas=list(data.get("strengthAreas") or []),
            improvement_areas=list(data.get("improvementAreas") or []),
        )


def skills_overlap(a: str, b: str) -> bool:
    """Case-insensitive containment in either direction ("React" ~ "React.js")."""
    a, b = a.lower(), b.lower()
    return a in b or b in a


def build_explanation(user_skills: list[str], job_skills: list[str], scores: dict[str, float]) -> Explanation:
    user_skills = [s for s in user_skills or [] if s]
    job_skills = [s for s in job_skills or [] if s]

    matched = [s for s in user_skills if any(skills_overlap(s, js) for js in job_skills)]
    missing = [s for s in job_skills if not any(skills_overlap(s, us) for us in user_skills)]

    strengths, improvements = [], []
    for facet, (strong_tag, weak_tag) in TAGS.items():
        score = scores[facet]
        if score >= STRONG:
            strengths.append(strong_tag)
        elif score < WEAK:
            improvements.append(weak_tag)

    return Explanation(
        matched_skills=matched[:MAX_MATCHED],
        missing_skills=missing[:MAX_MISSING],
        strength_areas=strengths,
        improvement_areas=improvements,
    )
