"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from memoria.config import get_settings
from memoria.content.verse import Difficulty, Testament, Verse


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


class ScriptedRandom:
    """RandomSource that replays a fixed list of floats, cycling at the end."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next_float(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from MEMORIA_* variables in the developer's shell."""
    import os

    for key in list(os.environ):
        if key.startswith("MEMORIA_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def first_choice_random():
    """Always picks the first candidate."""
    return ScriptedRandom([0.0])


@pytest.fixture
def juan_3_16():
    return Verse(
        reference="Juan 3:16",
        text=(
            "Porque de tal manera amó Dios al mundo, que ha dado a su Hijo unigénito, "
            "para que todo aquel que en él cree, no se pierda, mas tenga vida eterna"
        ),
        testament=Testament.NEW,
        theme="salvacion",
        difficulty=Difficulty.BEGINNER,
    )


@pytest.fixture
def salmo_23():
    return Verse(
        reference="Salmos 23:1",
        text="Jehová es mi pastor; nada me faltará",
        testament=Testament.OLD,
        theme="confianza",
        difficulty=Difficulty.BEGINNER,
    )


@pytest.fixture
def short_verse():
    return Verse(reference="Juan 11:35", text="Jesús lloró", testament=Testament.NEW, theme="amor")


@pytest.fixture
def sample_pool(juan_3_16, salmo_23):
    """A small corpus slice for choice drills."""
    return [
        juan_3_16,
        salmo_23,
        Verse(
            reference="Filipenses 4:13",
            text="Todo lo puedo en Cristo que me fortalece",
            theme="fortaleza",
        ),
        Verse(
            reference="Génesis 1:1",
            text="En el principio creó Dios los cielos y la tierra",
            testament=Testament.OLD,
            theme="escritura",
        ),
        Verse(
            reference="2 Corintios 5:7",
            text="Porque por fe andamos, no por vista",
            theme="fe",
        ),
    ]
