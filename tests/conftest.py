from datetime import datetime, timezone
from pathlib import Path

import pytest

from site_spec_drafter.generator import SiteSpecGenerator
from site_spec_drafter.models.intake import IntakeRecord

INTAKE_DIR = Path(__file__).resolve().parent.parent / "data" / "intakes"
FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def load_intake():
    def _load(name: str) -> IntakeRecord:
        fixture_path = INTAKE_DIR / f"{name}.json"
        return IntakeRecord.model_validate_json(fixture_path.read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def generator() -> SiteSpecGenerator:
    return SiteSpecGenerator(clock=lambda: FIXED_NOW)
