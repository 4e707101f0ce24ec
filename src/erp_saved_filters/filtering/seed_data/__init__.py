"""
Seed data for field registries.

This package contains JSON files with the filterable fields of each module:
- user_fields.json: Fields of the Users module (authentication, personal,
  professional, preferences and timestamps)
"""

from pathlib import Path

from ..registry import FieldRegistry

SEED_DATA_DIR = Path(__file__).parent


def load_user_fields() -> FieldRegistry:
    """Load the field registry of the Users module."""
    return FieldRegistry.from_json(SEED_DATA_DIR / "user_fields.json")
