"""Mini README: Shared fixtures for the Moneycount test-suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from moneycount.configuration import MoneycountSettings


@pytest.fixture
def settings(tmp_path: Path) -> MoneycountSettings:
    """Settings isolated from the developer's environment and data directory."""

    return MoneycountSettings(
        data_directory=tmp_path,
        left_currency="CAD",
        right_currency="RMB",
        confirm_key="Enter",
    )
