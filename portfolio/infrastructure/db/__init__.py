# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import (
    ENGINE,
    MAX_ROW_ID,
    Base,
    SessionLocal,
    drop_db,
    fits_row_id,
    init_db,
    is_unique_violation,
)

__all__ = [
    "Base",
    "ENGINE",
    "MAX_ROW_ID",
    "SessionLocal",
    "drop_db",
    "fits_row_id",
    "init_db",
    "is_unique_violation",
]
