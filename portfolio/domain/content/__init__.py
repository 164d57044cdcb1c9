# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    DEFAULT_PROJECT_IMAGE,
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

__all__ = [
    "DEFAULT_PROJECT_IMAGE",
    "BlogPost",
    "ContactMessage",
    "DashboardSummary",
    "DemoKind",
    "EngineeringDecision",
    "InteractiveDemo",
    "Project",
    "ProjectViewStat",
    "SkillCategory",
]
