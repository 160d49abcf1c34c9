"""
Dashboard service - builds the role-gated views.

Each view is one bulk fetch followed by pure aggregation (see
services/progress.py). Clients reload the whole view after any mutation,
so nothing here is cached.
"""
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import ConfigurationIncompleteException
from career_ladder.core.levels import get_career_level
from career_ladder.models.assessment import PROFICIENCY_LABELS, Proficiency
from career_ladder.models.skill import SkillCategory
from career_ladder.models.user import User
from career_ladder.repositories.assessment_repository import AssessmentRepository
from career_ladder.repositories.domain_repository import DomainRepository
from career_ladder.repositories.ladder_repository import LadderRepository
from career_ladder.repositories.skill_repository import SkillRepository
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.repositories.waiver_repository import WaiverRepository
from career_ladder.schemas.assessment import AssessmentResponse
from career_ladder.schemas.dashboard import (
    AdminDashboard,
    CareerLevelInfo,
    CatalogByCategory,
    CategorizedSkills,
    EmployeeDashboard,
    LevelProgressResponse,
    MemberProgress,
    SkillWithAssessment,
    TeamMembersView,
    ViewState,
)
from career_ladder.schemas.domain import DomainResponse
from career_ladder.schemas.skill import SkillResponse
from career_ladder.schemas.user import UserResponse
from career_ladder.services.access_service import AccessService, SessionContext
from career_ladder.services.progress import (
    LevelProgress,
    categorize_skills,
    compute_level_progress,
    compute_next_level_progress,
    latest_assessments,
)
from career_ladder.services.team_service import TeamService
from career_ladder.services.user_service import UserService
from career_ladder.services.waiver_service import to_waiver_response


def to_progress_response(progress: Optional[LevelProgress]) -> Optional[LevelProgressResponse]:
    if progress is None:
        return None
    return LevelProgressResponse(
        level=progress.level,
        met=progress.met,
        required=progress.required,
        percent=progress.percent,
        is_complete=progress.is_complete,
    )


def _state(populated: bool) -> ViewState:
    return ViewState.AUTHORIZED_POPULATED if populated else ViewState.AUTHORIZED_EMPTY


class DashboardService:
    def __init__(self):
        self.skill_repo = SkillRepository()
        self.assessment_repo = AssessmentRepository()
        self.waiver_repo = WaiverRepository()
        self.ladder_repo = LadderRepository()
        self.user_repo = UserRepository()
        self.domain_repo = DomainRepository()
        self.user_service = UserService()
        self.team_service = TeamService()
        self.access = AccessService()

    async def employee_dashboard(
        self,
        db: AsyncSession,
        session: SessionContext,
    ) -> EmployeeDashboard:
        """
        The signed-in user's own ladder.

        Raises:
            ConfigurationIncompleteException: No team or domain assigned yet.
        """
        user = session.user
        if not user.is_configured:
            raise ConfigurationIncompleteException()

        profile = await self.user_service.get_profile(db, user)
        ladder = await self.ladder_repo.find_for_team_and_domain(db, user.team_id, user.domain)
        skills = await self.skill_repo.list_filtered(db)
        assessments = await self.assessment_repo.list_for_user(db, user.id)
        waivers = await self.waiver_repo.list_for_user(db, user.id)

        current = compute_level_progress(user.current_level, ladder, skills, assessments, waivers)
        upcoming = compute_next_level_progress(user.current_level, ladder, skills, assessments, waivers)

        latest = latest_assessments(assessments)
        grouped = categorize_skills(skills, domain=user.domain, team_id=user.team_id)
        categorized = CategorizedSkills(**{
            category: [self._with_assessment(skill, latest) for skill in members]
            for category, members in grouped.items()
        })

        level = get_career_level(user.current_level)
        names = {skill.id: skill.name for skill in skills}
        populated = ladder is not None or any(grouped.values())

        return EmployeeDashboard(
            state=_state(populated),
            user=profile,
            level_info=CareerLevelInfo(**asdict(level)) if level else None,
            has_ladder=ladder is not None,
            current_progress=to_progress_response(current),
            next_progress=to_progress_response(upcoming),
            ready_for_promotion=upcoming is not None and upcoming.is_complete,
            skills=categorized,
            waivers=[to_waiver_response(w, names) for w in waivers],
        )

    async def team_members(
        self,
        db: AsyncSession,
        session: SessionContext,
        team_id: UUID,
    ) -> TeamMembersView:
        """Every member of a team with current / next level progress."""
        team = await self.team_service.get_team(db, team_id)
        self.access.ensure_can_view_team(session, team)

        members = await self.user_repo.list_by_team(db, team.id)
        member_ids = [m.id for m in members]
        skills = await self.skill_repo.list_filtered(db)
        assessments = await self.assessment_repo.list_for_users(db, member_ids)
        waivers = await self.waiver_repo.list_for_users(db, member_ids)
        ladders = {ladder.domain: ladder for ladder in await self.ladder_repo.list_for_team(db, team.id)}

        by_user_assessments = _group_by_user(assessments)
        by_user_waivers = _group_by_user(waivers)

        progress = [
            self._member_progress(
                member,
                ladders.get(member.domain) if member.domain else None,
                skills,
                by_user_assessments.get(member.id, []),
                by_user_waivers.get(member.id, []),
            )
            for member in members
        ]

        return TeamMembersView(
            state=_state(bool(members)),
            team=TeamService.to_response(team, len(members)),
            members=progress,
        )

    async def admin_dashboard(
        self,
        db: AsyncSession,
        session: SessionContext,
    ) -> AdminDashboard:
        self.access.ensure_admin(session)

        skills = await self.skill_repo.list_filtered(db)
        domains = await self.domain_repo.list_all(db)
        users = await self.user_repo.list_all(db)
        teams = await self.team_service.list_teams(db)

        catalog: Dict[str, List[SkillResponse]] = {category.value: [] for category in SkillCategory}
        for skill in skills:
            catalog[SkillCategory(skill.category).value].append(SkillResponse.model_validate(skill))

        populated = bool(skills or domains or users or teams)
        return AdminDashboard(
            state=_state(populated),
            skills=CatalogByCategory(**catalog),
            domains=[DomainResponse.model_validate(d) for d in domains],
            users=[UserResponse.model_validate(u) for u in users],
            teams=teams,
        )

    @staticmethod
    def _with_assessment(skill: Any, latest: Dict[str, Any]) -> SkillWithAssessment:
        assessment = latest.get(str(skill.id))
        label = PROFICIENCY_LABELS[Proficiency(assessment.level)] if assessment else PROFICIENCY_LABELS[Proficiency.NONE]
        return SkillWithAssessment(
            skill=SkillResponse.model_validate(skill),
            assessment=AssessmentResponse.model_validate(assessment) if assessment else None,
            proficiency_label=label,
        )

    @staticmethod
    def _member_progress(
        member: User,
        ladder: Any,
        skills: Sequence[Any],
        assessments: List[Any],
        waivers: List[Any],
    ) -> MemberProgress:
        current = compute_level_progress(member.current_level, ladder, skills, assessments, waivers)
        upcoming = compute_next_level_progress(member.current_level, ladder, skills, assessments, waivers)
        return MemberProgress(
            user=UserResponse.model_validate(member),
            has_ladder=ladder is not None,
            current_progress=to_progress_response(current),
            next_progress=to_progress_response(upcoming),
            ready_for_promotion=upcoming is not None and upcoming.is_complete,
        )


def _group_by_user(records: Sequence[Any]) -> Dict[Any, List[Any]]:
    grouped: Dict[Any, List[Any]] = {}
    for record in records:
        grouped.setdefault(record.user_id, []).append(record)
    return grouped
