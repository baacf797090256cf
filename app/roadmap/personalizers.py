"""
Roadmap personalization strategies.

``TemplatePersonalizer`` returns the static template. ``AIPersonalizer`` asks
the chat model to tailor the template to the user's skill gaps.
``FallbackPersonalizer`` runs a primary strategy and drops to a fallback when
the AI gateway fails, so a roadmap is always produced.
"""
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.core.config import settings
from app.core.errors import UpstreamServiceError
from app.nlp.keywords import chat_completion

logger = logging.getLogger(__name__)

STEP_TYPES = ("skill", "project", "course", "milestone")

SYSTEM_PROMPT = """You are a career coach AI that personalizes learning roadmaps. Given a user's current skills, missing skills, and a career template, you output a personalized roadmap that:
1. Acknowledges skills they already have (mark as completed or skip)
2. Focuses on their specific skill gaps
3. Provides actionable, specific steps with resource recommendations
4. Keeps the same structure but customizes content

Output a JSON array of roadmap steps."""

ROADMAP_TOOL = {
    "type": "function",
    "function": {
        "name": "create_roadmap",
        "description": "Create a personalized career roadmap",
        "parameters": {
            "type": "object",
            "properties": {
                "steps": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "description": {"type": "string"},
                            "type": {"type": "string", "enum": list(STEP_TYPES)},
                            "duration": {"type": "string"},
                            "resources": {
                                "type": "array",
                                "items": {
                                    "type": "object",
                                    "properties": {
                                        "name": {"type": "string"},
                                        "type": {"type": "string"},
                                    },
                                    "required": ["name", "type"],
                                },
                            },
                        },
                        "required": ["name", "description", "type", "duration"],
                    },
                },
            },
            "required": ["steps"],
        },
    },
}


@dataclass
class RoadmapContext:
    career_id: str
    career_name: str
    template: list[dict]
    missing_skills: list[str] = field(default_factory=list)
    matched_skills: list[str] = field(default_factory=list)
    experience: str | None = None
    interests: list[str] = field(default_factory=list)


class RoadmapPersonalizer(ABC):
    @abstractmethod
    def personalize(self, ctx: RoadmapContext) -> list[dict]:
        """Return raw steps (name, description, type, duration, resources?)."""
        raise NotImplementedError


class TemplatePersonalizer(RoadmapPersonalizer):
    def personalize(self, ctx: RoadmapContext) -> list[dict]:
        return [dict(phase) for phase in ctx.template]


class AIPersonalizer(RoadmapPersonalizer):
    def _user_prompt(self, ctx: RoadmapContext) -> str:
        phases = "\n".join(
            f"{i + 1}. {p['name']} ({p['type']}, {p['duration']}): {p['description']}"
            for i, p in enumerate(ctx.template)
        )
        return (
            f"Career Goal: {ctx.career_name}\n\n"
            f"User's Current Skills: {', '.join(ctx.matched_skills) or 'None specified'}\n"
            f"Skills to Learn: {', '.join(ctx.missing_skills) or 'General skills for this role'}\n"
            f"User Experience: {ctx.experience or 'Not specified'}\n"
            f"User Interests: {', '.join(ctx.interests) or 'Not specified'}\n\n"
            f"Base Template Phases:\n{phases}\n\n"
            "Create a personalized 5-7 step roadmap focusing on their skill gaps. Each step should have:\n"
            "- name: Short title\n"
            "- description: 1-2 sentence description\n"
            "- type: skill, project, course, or milestone\n"
            "- duration: Estimated time\n"
            '- resources: Array of 1-2 recommended resources (name and type like "course", "tutorial", "book")'
        )

    def personalize(self, ctx: RoadmapContext) -> list[dict]:
        data = chat_completion(
            [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self._user_prompt(ctx)},
            ],
            tools=[ROADMAP_TOOL],
            tool_choice={"type": "function", "function": {"name": "create_roadmap"}},
        )
        try:
            call = data["choices"][0]["message"]["tool_calls"][0]
            steps = json.loads(call["function"]["arguments"])["steps"]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("could not parse AI roadmap, using template: %s", exc)
            return [dict(phase) for phase in ctx.template]
        if not isinstance(steps, list) or not steps or not all(isinstance(s, dict) for s in steps):
            logger.warning("AI roadmap for %s has no usable steps, using template", ctx.career_id)
            return [dict(phase) for phase in ctx.template]
        return steps


class FallbackPersonalizer(RoadmapPersonalizer):
    def __init__(self, primary: RoadmapPersonalizer, fallback: RoadmapPersonalizer):
        self.primary = primary
        self.fallback = fallback

    def personalize(self, ctx: RoadmapContext) -> list[dict]:
        try:
            return self.primary.personalize(ctx)
        except UpstreamServiceError as exc:
            logger.warning("roadmap personalization failed for %s, using template: %s", ctx.career_id, exc)
            return self.fallback.personalize(ctx)


def get_personalizer() -> RoadmapPersonalizer:
    if not settings.LLM_API_KEY:
        return TemplatePersonalizer()
    return FallbackPersonalizer(AIPersonalizer(), TemplatePersonalizer())


def normalize_steps(raw: list[dict]) -> list[dict]:
    steps = []
    for i, step in enumerate(raw):
        step_type = step.get("type")
        steps.append({
            "id": f"step-{i + 1}",
            "name": step.get("name") or f"Step {i + 1}",
            "description": step.get("description") or "",
            "type": step_type if step_type in STEP_TYPES else "skill",
            "duration": step.get("duration") or "2-4 weeks",
            "order": i + 1,
            "completed": False,
            "resources": step.get("resources") or [],
        })
    return steps
