"""
Feeding persistence.
"""

from __future__ import annotations

from core import records

FEEDINGS = records.Table(
    name="feedings",
    columns=("pet_id", "type", "description", "quantity", "date"),
    parent_column="pet_id",
)
