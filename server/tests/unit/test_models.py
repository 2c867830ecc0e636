"""Unit tests for model helpers."""

import pytest

from tours_api.models import Travel


@pytest.mark.parametrize("days, nights", [(5, 4), (1, 0), (0, 0)])
def test_travel_number_of_nights(days, nights):
    assert Travel(slug="coast", name="Coast", number_of_days=days).number_of_nights == nights
