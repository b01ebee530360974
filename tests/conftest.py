import pytest

from catalogue_scraper.config import ScraperConfig
from catalogue_scraper.providers.United_States.university_of_southern_california import UniversityOfSouthernCaliforniaProvider
from tests.helpers import FakeSession


@pytest.fixture
def config(tmp_path):
    return ScraperConfig(request_delay=0, output_dir=tmp_path)


@pytest.fixture
def provider(config):
    return UniversityOfSouthernCaliforniaProvider(config)


@pytest.fixture
def fake_session(provider):
    session = FakeSession()
    provider.session = session
    return session
