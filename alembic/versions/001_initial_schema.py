"""initial career ladder schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

Creates the seven tables:
  • users, teams (circular FK: users.team_id <-> teams.leader_id)
  • domains, skills
  • assessments (unique per user + skill)
  • skill_waivers
  • ladder_configs (unique per team + domain)
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        # FK to users added below, once users exists
        sa.Column("leader_id", sa.Uuid(), nullable=True),
        sa.Column("domains", sa.JSON(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("name", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("team_id", sa.Uuid(), sa.ForeignKey("teams.id"), nullable=True),
        sa.Column("domain", sa.String(length=50), nullable=True),
        sa.Column("current_level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="employee"),
        sa.Column("last_seen_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_subject", "users", ["subject"], unique=True)
    op.create_index("ix_users_team_id", "users", ["team_id"])

    op.create_foreign_key("fk_teams_leader_id", "teams", "users", ["leader_id"], ["id"])

    op.create_table(
        "domains",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_domains_slug", "domains", ["slug"], unique=True)

    op.create_table(
        "skills",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("domain", sa.String(length=50), nullable=True),
        sa.Column("team_id", sa.Uuid(), sa.ForeignKey("teams.id"), nullable=True),
        sa.Column("applicable_levels", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_skills_category", "skills", ["category"])
    op.create_index("ix_skills_domain", "skills", ["domain"])
    op.create_index("ix_skills_team_id", "skills", ["team_id"])

    op.create_table(
        "assessments",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("skill_id", sa.Uuid(), sa.ForeignKey("skills.id"), nullable=False),
        sa.Column("level", sa.String(length=20), nullable=False, server_default="none"),
        sa.Column("assessed_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("assessed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "skill_id", name="uq_assessment_user_skill"),
    )
    op.create_index("ix_assessments_user_id", "assessments", ["user_id"])
    op.create_index("ix_assessments_skill_id", "assessments", ["skill_id"])

    op.create_table(
        "skill_waivers",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("skill_id", sa.Uuid(), sa.ForeignKey("skills.id"), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("waived_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("waived_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_skill_waivers_user_id", "skill_waivers", ["user_id"])
    op.create_index("ix_skill_waivers_skill_id", "skill_waivers", ["skill_id"])

    op.create_table(
        "ladder_configs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("team_id", sa.Uuid(), sa.ForeignKey("teams.id"), nullable=False),
        sa.Column("domain", sa.String(length=50), nullable=False),
        sa.Column("skills_by_level", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("team_id", "domain", name="uq_ladder_team_domain"),
    )
    op.create_index("ix_ladder_configs_team_id", "ladder_configs", ["team_id"])


def downgrade() -> None:
    op.drop_table("ladder_configs")
    op.drop_table("skill_waivers")
    op.drop_table("assessments")
    op.drop_table("skills")
    op.drop_table("domains")
    op.drop_constraint("fk_teams_leader_id", "teams", type_="foreignkey")
    op.drop_table("users")
    op.drop_table("teams")
