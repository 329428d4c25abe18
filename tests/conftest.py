"""
Test configuration and fixtures for media naming tests.

This module provides:
- Shared media records (series, episodes, movies) used across test modules
- Naming context builders
- Factories that wire the naming services for a given NamingConfig
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


# ==================== Test Data ====================

class TestData:
    """Media metadata shared by the naming tests."""

    SERIES_TITLE = 'Breaking Bad'
    SERIES_YEAR = 2008
    SERIES_IMDB_ID = 'tt0903747'
    SERIES_TVDB_ID = 81189

    PILOT_TITLE = 'Pilot'
    SECOND_EPISODE_TITLE = "Cat's in the Bag"
    PILOT_AIR_DATE = date(2008, 1, 20)

    EPISODE_QUALITY = 'HDTV-720p'
    ORIGINAL_EPISODE_FILE = 'Breaking.Bad.S01E01.720p.HDTV.x264-CTU.mkv'

    MOVIE_TITLE = 'The Matrix'
    MOVIE_YEAR = 1999
    MOVIE_QUALITY = 'Bluray-1080p'


# ==================== Record Fixtures ====================

@pytest.fixture
def series():
    """Standard series record."""
    from src.core.domain.entities import Series

    return Series(
        title=TestData.SERIES_TITLE,
        year=TestData.SERIES_YEAR,
        imdb_id=TestData.SERIES_IMDB_ID,
        tvdb_id=TestData.SERIES_TVDB_ID
    )


@pytest.fixture
def pilot():
    """First episode of season 1."""
    from src.core.domain.entities import Episode

    return Episode(
        season_number=1,
        episode_number=1,
        title=TestData.PILOT_TITLE,
        air_date=TestData.PILOT_AIR_DATE
    )


@pytest.fixture
def second_episode():
    """Second episode of season 1."""
    from src.core.domain.entities import Episode

    return Episode(
        season_number=1,
        episode_number=2,
        title=TestData.SECOND_EPISODE_TITLE,
        air_date=date(2008, 1, 27)
    )


@pytest.fixture
def episode_quality():
    """Quality of the episode file."""
    from src.core.domain.value_objects import Quality

    return Quality(name=TestData.EPISODE_QUALITY)


@pytest.fixture
def episode_context(series, pilot, episode_quality):
    """Single-episode naming context without an original file name."""
    from src.core.domain.entities import NamingContext

    return NamingContext(series=series, episodes=(pilot,), quality=episode_quality)


@pytest.fixture
def multi_episode_context(series, pilot, second_episode, episode_quality):
    """Naming context for a file holding two episodes."""
    from src.core.domain.entities import NamingContext

    return NamingContext(
        series=series,
        episodes=(pilot, second_episode),
        quality=episode_quality
    )


@pytest.fixture
def movie_context():
    """Movie naming context."""
    from src.core.domain.entities import Movie, NamingContext
    from src.core.domain.value_objects import Quality

    return NamingContext(
        movie=Movie(title=TestData.MOVIE_TITLE, year=TestData.MOVIE_YEAR),
        quality=Quality(name=TestData.MOVIE_QUALITY)
    )


# ==================== Service Fixtures ====================

@pytest.fixture
def naming_config():
    """Default naming configuration."""
    from src.core.config import NamingConfig

    return NamingConfig()


@pytest.fixture
def renderer_factory():
    """Build a TemplateRenderer for an optional NamingConfig."""
    from src.services.naming.modifier_parser import ModifierParser
    from src.services.naming.template_renderer import TemplateRenderer
    from src.services.naming.template_tokenizer import TemplateTokenizer
    from src.services.naming.token_resolver import TokenResolver

    def factory(naming_config=None):
        return TemplateRenderer(
            tokenizer=TemplateTokenizer(),
            modifier_parser=ModifierParser(),
            token_resolver=TokenResolver(naming_config)
        )

    return factory


@pytest.fixture
def renderer(renderer_factory, naming_config):
    """TemplateRenderer using the default configuration."""
    return renderer_factory(naming_config)


@pytest.fixture
def naming_service_factory():
    """
    Build a NamingService for a NamingConfig.

    Uses a fresh container with the naming configuration overridden, the
    same way the application wires it.
    """
    from dependency_injector import providers

    from src.container import Container

    def factory(naming_config):
        container = Container()
        container.naming_config.override(providers.Object(naming_config))
        return container.naming_service()

    return factory


@pytest.fixture
def naming_service(naming_service_factory, naming_config):
    """NamingService using the default configuration."""
    return naming_service_factory(naming_config)
