"""
Daily activity persistence.
"""

from __future__ import annotations

from core import records

DAILY_ACTIVITIES = records.Table(
    name="daily_activities",
    columns=("pet_id", "type", "duration", "notes", "date"),
    parent_column="pet_id",
)
