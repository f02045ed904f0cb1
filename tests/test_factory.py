import pytest

from reconstructors.brute_force import BruteForceReconstructor
from reconstructors.factory import create_reconstructor, normalize_strategy
from reconstructors.priority import PriorityReconstructor


def test_defaults_to_priority():
    assert isinstance(create_reconstructor({}), PriorityReconstructor)


@pytest.mark.parametrize("name", ["brute_force", "brute", "Brute-Force", " bruteforce "])
def test_brute_force_aliases(name):
    cfg = {"reconstruction": {"strategy": name}}
    assert isinstance(create_reconstructor(cfg), BruteForceReconstructor)


@pytest.mark.parametrize("name", ["priority", "heap", "PQ"])
def test_priority_aliases(name):
    assert normalize_strategy(name) == "priority"


def test_override_beats_config():
    cfg = {"reconstruction": {"strategy": "priority"}}
    r = create_reconstructor(cfg, strategy_override="brute_force")
    assert r.name() == "brute_force"


def test_settings_are_passed_through():
    cfg = {"reconstruction": {"strategy": "priority", "max_fragment_length": 50}}
    assert create_reconstructor(cfg).max_fragment_length == 50


def test_unknown_strategy_raises():
    with pytest.raises(ValueError):
        create_reconstructor({"reconstruction": {"strategy": "quantum"}})
