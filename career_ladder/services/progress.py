"""
Progress aggregation - how far a user is through a ladder level.

Pure functions over already-fetched records. Nothing here touches the
database, and nothing raises: missing configuration, skills or
assessments all count as zero.

Inputs are duck-typed so ORM rows and plain objects both work:
- ladder config: ``skills_by_level`` mapping level (int or str) to
  ``{"generic_skills": [...], "domain_skills": [...], "team_skills": [...]}``
- skills: ``id``
- assessments: ``skill_id``, ``level``, ``assessed_at``
- waivers: ``skill_id``, ``level``
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from career_ladder.core.levels import MAX_LEVEL
from career_ladder.models.assessment import Proficiency
from career_ladder.models.skill import SkillCategory

LEVEL_SKILL_GROUPS = ("generic_skills", "domain_skills", "team_skills")


@dataclass(frozen=True)
class LevelProgress:
    level: int
    met: int
    required: int

    @property
    def percent(self) -> float:
        if self.required == 0:
            return 0.0
        return round(self.met / self.required * 100, 1)

    @property
    def is_complete(self) -> bool:
        """All requirements met, and there was at least one."""
        return self.required > 0 and self.met == self.required


def _level_entry(config: Any, level: int) -> Optional[Dict[str, Any]]:
    if config is None:
        return None
    skills_by_level = getattr(config, "skills_by_level", None) or {}
    entry = skills_by_level.get(str(level))
    if entry is None:
        entry = skills_by_level.get(level)
    return entry


def configured_skill_ids(config: Any, level: int) -> List[str]:
    """Skill ids a ladder lists for a level (generic + domain + team), in order, de-duplicated."""
    entry = _level_entry(config, level)
    if not entry:
        return []

    seen = set()
    ids = []
    for group in LEVEL_SKILL_GROUPS:
        for skill_id in entry.get(group) or []:
            key = str(skill_id)
            if key not in seen:
                seen.add(key)
                ids.append(key)
    return ids


def waived_skill_ids(waivers: Iterable[Any], level: int) -> set[str]:
    """Skills with a waiver at this level or any level below it."""
    return {str(w.skill_id) for w in waivers if w.level <= level}


def latest_assessments(assessments: Iterable[Any]) -> Dict[str, Any]:
    """Most recent assessment per skill id."""
    latest: Dict[str, Any] = {}
    for assessment in assessments:
        key = str(assessment.skill_id)
        current = latest.get(key)
        if current is None or _assessed_at(assessment) > _assessed_at(current):
            latest[key] = assessment
    return latest


def _assessed_at(assessment: Any) -> datetime:
    value = getattr(assessment, "assessed_at", None)
    if value is None:
        return datetime.min
    # SQLite hands back naive datetimes; compare everything naive
    return value.replace(tzinfo=None)


def _proficiency_value(level: Any) -> str:
    return level.value if isinstance(level, Proficiency) else str(level)


def required_skills(
    level: int,
    config: Any,
    skills: Sequence[Any],
    waivers: Iterable[Any],
) -> List[Any]:
    """
    Catalog skills the ladder requires at ``level`` after waivers.

    Ids in the ladder that are not in the catalog are ignored.
    """
    wanted = set(configured_skill_ids(config, level))
    if not wanted:
        return []
    waived = waived_skill_ids(waivers, level)
    return [
        skill for skill in skills
        if str(skill.id) in wanted and str(skill.id) not in waived
    ]


def compute_level_progress(
    level: int,
    config: Any,
    skills: Sequence[Any],
    assessments: Iterable[Any],
    waivers: Iterable[Any],
) -> LevelProgress:
    """
    (met, required) for one level.

    A required skill is met only when its latest assessment is exactly
    ``fluent``.
    """
    waivers = list(waivers)
    required = required_skills(level, config, skills, waivers)
    latest = latest_assessments(assessments)

    met = sum(
        1 for skill in required
        if str(skill.id) in latest
        and _proficiency_value(latest[str(skill.id)].level) == Proficiency.FLUENT.value
    )
    return LevelProgress(level=level, met=met, required=len(required))


def compute_next_level_progress(
    current_level: int,
    config: Any,
    skills: Sequence[Any],
    assessments: Iterable[Any],
    waivers: Iterable[Any],
) -> Optional[LevelProgress]:
    """Progress towards the next level; None when already at the top."""
    if current_level >= MAX_LEVEL:
        return None
    return compute_level_progress(current_level + 1, config, skills, assessments, waivers)


def categorize_skills(
    skills: Iterable[Any],
    *,
    domain: Optional[str],
    team_id: Any,
) -> Dict[str, List[Any]]:
    """
    Split the catalog into what applies to one user: all generic skills,
    domain skills for their domain, team skills for their team.
    """
    grouped: Dict[str, List[Any]] = {category.value: [] for category in SkillCategory}
    team_key = str(team_id) if team_id is not None else None

    for skill in skills:
        category = SkillCategory(skill.category)
        if category is SkillCategory.GENERIC:
            grouped[category.value].append(skill)
        elif category is SkillCategory.DOMAIN:
            if domain and skill.domain == domain:
                grouped[category.value].append(skill)
        elif category is SkillCategory.TEAM:
            if team_key and skill.team_id is not None and str(skill.team_id) == team_key:
                grouped[category.value].append(skill)
        else:
            raise ValueError(f"Unhandled skill category: {category}")

    return grouped
