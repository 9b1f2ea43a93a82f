# tests/conftest.py
import pytest

from aviary.birds import Dove, Ostrich, Parrot, Penguin, Swallow, SwiftBird
from aviary.config import AviarySettings
from aviary.vehicles import Motorcycle

AVIARY_ENV_VARS = (
    "AVIARY_LOG_LEVEL",
    "AVIARY_SPEED_UNIT",
    "AVIARY_BOOST_POWER",
    "AVIARY_BOOST_ROUNDS",
    "AVIARY_RACER_NAME",
)


@pytest.fixture
def parrot():
    return Parrot(name="Parrot", amplitude=12.0, frequency=5.0)


@pytest.fixture
def dove():
    return Dove(name="Dove", amplitude=14.0, frequency=3.0)


@pytest.fixture
def penguin():
    return Penguin(name="Penguin")


@pytest.fixture
def ostrich():
    return Ostrich(name="Ostrich")


@pytest.fixture
def motorcycle():
    return Motorcycle(name="Augusto")


@pytest.fixture
def swift_bird():
    return SwiftBird(version=5.0)


@pytest.fixture
def race_entities(parrot, penguin, motorcycle):
    """The race field, in starting order."""
    return [
        Swallow.AFRICAN,
        Swallow.EUROPEAN,
        Swallow.UNKNOWN,
        penguin,
        parrot,
        motorcycle,
    ]


@pytest.fixture
def clean_settings(monkeypatch):
    """Settings built from defaults only, ignoring env vars and .env files."""
    for var in AVIARY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return AviarySettings(_env_file=None)
