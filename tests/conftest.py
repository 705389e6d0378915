"""
Shared test fixtures for the tag governance tests.

Every test gets its own in-memory database, so no state leaks between tests.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.governance_config import GovernanceConfig
from database import DatabaseManager, StaffStore
from src.models import Actor
from src.services.events import EventBus
from src.services.governance import TagGovernanceService

SAMPLE_STAFF = [
    {"id": "1", "name": "Marcus Bell", "role": "Head Coach", "club": "Austin FC",
     "tags": ["Proven"], "profilePrivacy": "Public"},
    {"id": "2", "name": "Daniel Ortega", "role": "Assistant Coach", "club": "Real Salt Lake",
     "tags": ["Emerging", "Proven"], "profilePrivacy": "Public"},
    {"id": "3", "name": "Samuel Okafor", "role": "Sporting Director", "club": "Columbus Crew",
     "tags": ["Proven", "Elite"], "profilePrivacy": "Private"},
    {"id": "4", "name": "Kenji Watanabe", "role": "Director of Analytics",
     "tags": ["High Potential", "Emerging", "Homegrown", "Unproven", "Elite"],
     "profilePrivacy": "Public"},
    {"id": "5", "name": "Rafael Souza", "role": "Goalkeeper Coach",
     "tags": [], "profilePrivacy": "Private"},
]


@pytest.fixture
def config():
    """Config with an empty catalog so tag listings only reflect the roster."""
    return GovernanceConfig(max_tags=5, default_tags=[], staff_data_path=None)


@pytest.fixture
def store():
    """Fresh store on a private in-memory database."""
    return StaffStore(DatabaseManager("sqlite://"))


@pytest.fixture
def events():
    return EventBus()


@pytest.fixture
def governance(store, config, events):
    """Governance service with the sample roster loaded."""
    service = TagGovernanceService(store=store, config=config, events=events)
    service.load_staff(SAMPLE_STAFF)
    return service


@pytest.fixture
def recorded_events(events):
    """Every event published during the test, in order."""
    seen = []
    events.subscribe(seen.append)
    return seen


@pytest.fixture
def league():
    return Actor.league_admin()


@pytest.fixture
def club():
    return Actor.club("Austin FC")
