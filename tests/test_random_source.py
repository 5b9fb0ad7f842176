import pytest

from price_predictor.core.config import settings
from price_predictor.models.random_source import (
    FixedRandomSource,
    SeededRandomSource,
    SystemRandomSource,
    random_source,
)


def test_system_source_in_unit_interval():
    src = SystemRandomSource()
    for _ in range(100):
        assert 0.0 <= src.next() < 1.0


def test_fixed_source_rejects_out_of_range():
    with pytest.raises(ValueError):
        FixedRandomSource(1.0)
    with pytest.raises(ValueError):
        FixedRandomSource(-0.1)


def test_neutral_source():
    assert FixedRandomSource.neutral().next() == 0.5


def test_factory_uses_seed_when_configured(monkeypatch):
    monkeypatch.setattr(settings, "RANDOM_SEED", 123)
    src = random_source()
    assert isinstance(src, SeededRandomSource)
    assert src.seed == 123


def test_factory_defaults_to_system(monkeypatch):
    monkeypatch.setattr(settings, "RANDOM_SEED", None)
    assert isinstance(random_source(), SystemRandomSource)
