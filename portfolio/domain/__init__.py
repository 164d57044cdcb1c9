# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .content import (
    BlogPost,
    ContactMessage,
    DashboardSummary,
    DemoKind,
    EngineeringDecision,
    InteractiveDemo,
    Project,
    ProjectViewStat,
    SkillCategory,
)
from .exceptions import InvariantViolation, InvariantViolationError

__all__ = [
    "BlogPost",
    "ContactMessage",
    "DashboardSummary",
    "DemoKind",
    "EngineeringDecision",
    "InteractiveDemo",
    "InvariantViolation",
    "InvariantViolationError",
    "Project",
    "ProjectViewStat",
    "SkillCategory",
]
