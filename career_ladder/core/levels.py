"""
Career level reference data (IC1 to IC7).
"""
from dataclasses import dataclass
from typing import Optional

MIN_LEVEL = 1
MAX_LEVEL = 7
ALL_LEVELS = list(range(MIN_LEVEL, MAX_LEVEL + 1))


@dataclass(frozen=True)
class CareerLevel:
    level: int
    title: str
    focus: str
    description: str


CAREER_LEVELS = [
    CareerLevel(
        level=1,
        title="IC1 Junior [Specialist]",
        focus="Learning & Execution",
        description=(
            "Learns foundational skills and company processes. "
            "Executes clearly defined tasks under supervision."
        ),
    ),
    CareerLevel(
        level=2,
        title="IC2 [Specialist]",
        focus="Independent Professional",
        description=(
            "Reliably and independently works on standard tasks. "
            "Requires minimal supervision."
        ),
    ),
    CareerLevel(
        level=3,
        title="IC3 Senior [Specialist] I",
        focus="Ownership & Improvement",
        description=(
            "Fully autonomous, owns complete areas. Proactively identifies "
            "improvements. Mentors L1/L2."
        ),
    ),
    CareerLevel(
        level=4,
        title="IC4 Senior [Specialist] II",
        focus="Leading Projects",
        description="Leads complex projects within domain. Recognized expert and mentor.",
    ),
    CareerLevel(
        level=5,
        title="IC5 Lead [Specialist]",
        focus="Scaling Influence",
        description="Work impacts multiple teams. Designs solutions for broader effectiveness.",
    ),
    CareerLevel(
        level=6,
        title="IC6 Principal [Specialist]",
        focus="Domain Leadership",
        description="Drives long-term strategy for expert domain. Mentors senior experts.",
    ),
    CareerLevel(
        level=7,
        title="IC7 Distinguished [Specialist]",
        focus="Vision Leadership",
        description="Shapes discipline direction. Influences company-wide strategy.",
    ),
]


def get_career_level(level: int) -> Optional[CareerLevel]:
    """Look up level metadata; None for out-of-range levels."""
    for career_level in CAREER_LEVELS:
        if career_level.level == level:
            return career_level
    return None
