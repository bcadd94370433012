"""Skill normalization, alias lookup, extraction and keyword comparison.

Shared by the skill comparison route and the job ranking flow. All tables
here are process-wide constants.
"""

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from models.schemas.skills_comparison import GapAnalysis, SkillComparison

logger = logging.getLogger(__name__)

_NON_SKILL_CHARS = re.compile(r"[^a-z0-9+#]")

# ---------------------------------------------------------------------------
# Known skill variations: canonical name -> aliases
# Aliases containing punctuation or spaces ("react.js", "amazon web services")
# are kept for reference but can never equal a normalized token.
# ---------------------------------------------------------------------------
SKILL_VARIATIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "javascript": ("js", "ecmascript"),
    "typescript": ("ts",),
    "react": ("reactjs", "react.js"),
    "node": ("nodejs", "node.js"),
    "postgres": ("postgresql", "psql"),
    "python": ("py",),
    "golang": ("go",),
    "c++": ("cpp", "cplusplus"),
    "c#": ("csharp", "dotnet", ".net"),
    "vue": ("vuejs", "vue.js"),
    "angular": ("angularjs",),
    "nextjs": ("next.js", "next"),
    "docker": ("containers",),
    "kubernetes": ("k8s",),
    "aws": ("amazon web services",),
    "gcp": ("google cloud", "google cloud platform"),
    "azure": ("microsoft azure",),
    "mongodb": ("mongo",),
    "redis": ("redisdb",),
    "graphql": ("gql",),
    "tailwind": ("tailwindcss", "tailwind css"),
    "sass": ("scss",),
    "jest": ("testing",),
    "vitest": ("testing",),
    "cypress": ("e2e testing",),
    "playwright": ("e2e testing",),
})

# Vocabulary scanned in free-text job descriptions
COMMON_SKILLS: tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Next.js", "Node.js",
    "Python", "Django", "Flask", "FastAPI", "Java", "Spring", "Kotlin",
    "Go", "Golang", "Rust", "C++", "C#", ".NET",
    "SQL", "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform",
    "GraphQL", "REST API", "gRPC", "Microservices",
    "Git", "CI/CD", "Jenkins", "GitHub Actions",
    "HTML", "CSS", "Tailwind", "Sass", "SCSS",
    "Testing", "Jest", "Cypress", "Playwright", "Vitest",
    "Agile", "Scrum", "Jira", "Figma",
    "Machine Learning", "AI", "TensorFlow", "PyTorch",
    "NoSQL", "Linux", "Bash", "Shell",
)


def normalize_skill(skill: str) -> str:
    """Lowercase and strip everything except letters, digits, '+' and '#'."""
    return _NON_SKILL_CHARS.sub("", skill.lower().strip())


def get_variations(skill: str) -> set[str]:
    """Return the normalized skill plus every known alias of it.

    Lookup works in both directions: "js" yields the "javascript" entry and
    "javascript" yields "js".
    """
    normalized = normalize_skill(skill)
    variations = {normalized}
    for canonical, aliases in SKILL_VARIATIONS.items():
        if normalized == canonical or normalized in aliases:
            variations.add(canonical)
            variations.update(aliases)
    return variations


def extract_skills_from_description(description: str | None) -> list[str]:
    """Return vocabulary skills that appear verbatim in the description.

    Plain substring matching, so "Go" also hits "Google". Callers that need
    precision should pass structured required skills instead.
    """
    if not description:
        return []

    lower_desc = description.lower()
    return [skill for skill in COMMON_SKILLS if skill.lower() in lower_desc]


def get_job_skills(gap_analysis: GapAnalysis | None, description: str | None) -> list[str]:
    """Prefer the stored required skills, else extract from the description."""
    if gap_analysis is not None and gap_analysis.required_skills:
        return list(gap_analysis.required_skills)
    return extract_skills_from_description(description)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _is_partial(candidate_variations: Iterable[str], required_normalized: str) -> bool:
    return any(
        v in required_normalized or required_normalized in v
        for v in candidate_variations
    )


def compare_skills(
    candidate_skills: Sequence[str] | None,
    required_skills: Sequence[str] | None,
) -> SkillComparison:
    """Bucket each required skill as matched, partial or missing.

    - matched: a candidate skill shares a normalized form or alias with it
    - partial: no alias hit, but a candidate variation is a substring of the
      required skill (or the reverse), e.g. "React" vs "React Native"
    - missing: neither

    Partial matches earn half credit in match_percentage.
    """
    if not candidate_skills or not required_skills:
        return SkillComparison(
            missing=list(required_skills or []),
            match_percentage=0,
            total=len(required_skills or []),
        )

    candidate_variations = [get_variations(s) for s in candidate_skills]

    matched: list[str] = []
    partial: list[str] = []
    missing: list[str] = []

    for required in required_skills:
        required_normalized = normalize_skill(required)
        required_variations = get_variations(required)

        if any(cv & required_variations for cv in candidate_variations):
            matched.append(required)
        elif any(_is_partial(cv, required_normalized) for cv in candidate_variations):
            partial.append(required)
        else:
            missing.append(required)

    total = len(required_skills)
    match_percentage = _round_half_up((len(matched) + len(partial) * 0.5) / total * 100)

    logger.debug(
        "Skill comparison: %d matched, %d partial, %d missing of %d",
        len(matched), len(partial), len(missing), total,
    )
    return SkillComparison(
        matched=matched,
        partial=partial,
        missing=missing,
        match_percentage=match_percentage,
        total=total,
    )
