# app/nlp/facets.py
"""Text rendered for each comparison facet before it is embedded."""

FACETS = ("skills", "experience", "interests")

def _join(items) -> str:
    return ", ".join(items or [])

def profile_facet_texts(
    skills: list[str],
    interests: list[str],
    experience: str | None = None,
    resume_text: str | None = None,
    career_goals: list[str] | None = None,
    work_environment: str | None = None,
    salary_range: str | None = None,
) -> dict[str, str]:
    goals = _join(career_goals)
    return {
        "skills": (
            f"Skills and competencies: {_join(skills)}. \n"
            f"      Technical abilities include: {_join(skills[:10])}."
        ),
        "experience": (
            f"Professional experience: {experience or 'Entry level'}. \n"
            f"      Resume summary: {(resume_text or '')[:1500] or 'No resume provided'}.\n"
            f"      Career goals: {goals or 'Career growth'}."
        ),
        "interests": (
            f"Career interests: {_join(interests)}.\n"
            f"      Preferred work environment: {work_environment or 'Flexible'}.\n"
            f"      Salary expectations: {salary_range or 'Competitive'}.\n"
            f"      Aspirations: {goals or 'Professional development'}."
        ),
    }

def job_facet_texts(title: str, company: str | None, experience_level: str | None,
                    required_skills: list[str], description: str | None) -> dict[str, str]:
    return {
        "skills": f"Required skills: {_join(required_skills)}",
        "experience": f"Experience level: {experience_level}. Role: {title} at {company}",
        "interests": description or title,
    }
