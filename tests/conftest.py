from datetime import date

import pytest

from precip_window.models import Layout, Station


@pytest.fixture
def hakodate():
    return Station("47430", "23", "函館", Layout.PRIMARY)


@pytest.fixture
def kakumi():
    return Station("0147", "23", "川汲", Layout.AUXILIARY)


@pytest.fixture
def fixed_today():
    return date(2024, 3, 10)
