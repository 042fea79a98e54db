import pytest
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from zoo_management import EventLog, Habitat, IdIssuer, Zoo


@pytest.fixture
def events():
    return EventLog()


@pytest.fixture
def ids():
    return IdIssuer(start=100)


@pytest.fixture
def savannah(events):
    return Habitat("Savannah", events)


@pytest.fixture
def zoo(events):
    return Zoo(events)
