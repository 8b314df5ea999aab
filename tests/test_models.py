# FILE: tests/test_models.py
import pytest
from gift_exchange.config import DEFAULT_CONFIG
from gift_exchange.models import ExchangeConfig, ExchangeSpec, DrawResult

def test_default_config_matches_limits():
    cfg = ExchangeConfig(**DEFAULT_CONFIG)
    assert cfg.max_assignment_attempts == 10
    assert cfg.max_total_restarts == 10000
    assert cfg.random_seed is None

def test_config_rejects_zero_limits():
    with pytest.raises(ValueError):
        ExchangeConfig(max_total_restarts=0)
    with pytest.raises(ValueError):
        ExchangeConfig(max_assignment_attempts=0)

def test_spec_participants_unique_and_present():
    with pytest.raises(ValueError):
        ExchangeSpec(participants=["a", "a"])
    with pytest.raises(ValueError):
        ExchangeSpec(participants=[])

def test_draw_result_defaults():
    r = DrawResult()
    assert r.assignment is None and r.error is None and r.problems == []
