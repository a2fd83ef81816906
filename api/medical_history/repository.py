"""
Medical history persistence.
"""

from __future__ import annotations

from core import records

MEDICAL_HISTORIES = records.Table(
    name="medical_histories",
    columns=("pet_id", "type", "description", "date"),
    parent_column="pet_id",
)
