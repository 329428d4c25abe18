"""Unit tests for TokenResolver and the token table."""

from datetime import date, datetime

import pytest

from src.core.domain.entities import Episode, Movie, NamingContext, Series
from src.core.domain.value_objects import MediaInfo, Quality, ReleaseInfo
from src.services.naming.token_resolver import (
    TOKEN_DEFINITIONS,
    TOKEN_TABLE,
    TokenResolver,
    normalize_token_name,
)

EXPECTED_TOKEN_NAMES = [
    'Series Title', 'Series CleanTitle', 'Series TitleYear', 'Series CleanTitleYear',
    'Series TitleThe', 'Series CleanTitleThe', 'Series TitleTheYear',
    'Series TitleFirstCharacter', 'Series Year', 'Year',
    'Season', 'Season:0', 'Season:00', 'Season:000', 'Season:0000',
    'Episode', 'Episode:0', 'Episode:00', 'Episode:000', 'Episode:0000',
    'Absolute Episode', 'Absolute Episode:00', 'Absolute Episode:000',
    'Absolute Episode:0000', 'Episode Title', 'Episode CleanTitle',
    'Air Date', 'Air-Date', 'Air.Date', 'Air_Date',
    'Quality Full', 'Quality Title', 'Quality', 'Quality Proper', 'Quality Real',
    'MediaInfo Simple', 'MediaInfo Full', 'MediaInfo VideoCodec',
    'MediaInfo VideoBitDepth', 'MediaInfo VideoDynamicRange', 'MediaInfo AudioCodec',
    'MediaInfo AudioChannels', 'MediaInfo AudioLanguages', 'MediaInfo SubtitleLanguages',
    'Release Group', 'Release Hash', 'Original Title', 'Original Filename',
    'Edition Tags', 'Edition',
    'Movie Title', 'Movie CleanTitle', 'Movie TitleYear', 'Movie CleanTitleYear',
    'Movie TitleThe', 'Movie TitleFirstCharacter', 'Movie Year', 'Release Year',
    'ImdbId', 'TmdbId', 'TvdbId', 'imdb-Id', 'tmdb-Id', 'tvdb-Id',
]


@pytest.fixture
def resolver():
    """Create a TokenResolver with every token enabled."""
    return TokenResolver()


class TestTokenTable:
    """Tests for the closed token table."""

    def test_table_contains_every_token(self):
        """Should define every documented token."""
        for name in EXPECTED_TOKEN_NAMES:
            assert normalize_token_name(name) in TOKEN_TABLE, name

    def test_token_names_are_unique(self):
        """Should not define a token twice."""
        assert len(TOKEN_TABLE) == len(TOKEN_DEFINITIONS)

    def test_lookup_is_case_insensitive(self, resolver, episode_context):
        """Should resolve tokens regardless of case and spacing."""
        assert resolver.resolve('series title', episode_context) == 'Breaking Bad'
        assert resolver.resolve('SERIES   TITLE', episode_context) == 'Breaking Bad'

    def test_unknown_token_is_absent(self, resolver, episode_context):
        """Should resolve unknown tokens to None."""
        assert resolver.resolve('Not A Token', episode_context) is None
        assert resolver.is_known('Not A Token') is False
        assert resolver.is_known('season:00') is True


class TestSeriesTokens:
    """Tests for series tokens."""

    def test_series_title_variants(self, resolver, episode_context):
        """Should resolve title, year and combined tokens."""
        assert resolver.resolve('Series Title', episode_context) == 'Breaking Bad'
        assert resolver.resolve('Series Year', episode_context) == '2008'
        assert resolver.resolve('Year', episode_context) == '2008'
        assert resolver.resolve('Series TitleYear', episode_context) == 'Breaking Bad (2008)'
        assert resolver.resolve('Series TitleFirstCharacter', episode_context) == 'B'

    def test_title_the(self, resolver):
        """Should move a leading 'The' to the end."""
        context = NamingContext(series=Series(title='The Office', year=2005))

        assert resolver.resolve('Series TitleThe', context) == 'Office, The'
        assert resolver.resolve('Series TitleTheYear', context) == 'Office, The (2005)'

    @pytest.mark.parametrize('title', [
        'The Office', 'Office, The', 'the wire', 'Theater', 'The', 'Breaking Bad',
    ])
    def test_title_the_is_idempotent(self, resolver, title):
        """Should give the same result when applied to its own output."""
        once = resolver.resolve('Series TitleThe', NamingContext(series=Series(title=title)))
        twice = resolver.resolve('Series TitleThe', NamingContext(series=Series(title=once)))

        assert once == twice

    def test_title_the_requires_article_word(self, resolver):
        """Should not treat a word starting with 'The' as the article."""
        context = NamingContext(series=Series(title='Theater'))

        assert resolver.resolve('Series TitleThe', context) == 'Theater'

    @pytest.mark.parametrize('title,expected', [
        ("Marvel's Agents of S.H.I.E.L.D.", 'Marvels Agents of SHIELD'),
        ('Pokémon', 'Pokemon'),
        ('Law & Order: SVU', 'Law and Order SVU'),
    ])
    def test_clean_title(self, resolver, title, expected):
        """Should strip diacritics and punctuation."""
        context = NamingContext(series=Series(title=title))

        assert resolver.resolve('Series CleanTitle', context) == expected

    def test_missing_year_keeps_title(self, resolver):
        """Should not add an empty year to TitleYear."""
        context = NamingContext(series=Series(title='Breaking Bad'))

        assert resolver.resolve('Series TitleYear', context) == 'Breaking Bad'
        assert resolver.resolve('Series Year', context) is None


class TestEpisodeTokens:
    """Tests for season and episode tokens."""

    def test_zero_pad_full_range(self, resolver):
        """Should pad every number in [0, 9999] to at least the width."""
        for number in range(10000):
            context = NamingContext(episodes=(Episode(season_number=number, episode_number=number),))
            for width in (1, 2, 3, 4):
                for base in ('Season', 'Episode'):
                    value = resolver.resolve(f'{base}:{"0" * width}', context)
                    assert len(value) == max(width, len(str(number)))
                    assert int(value) == number

    def test_unpadded_tokens(self, resolver, episode_context):
        """Should resolve plain season and episode numbers."""
        assert resolver.resolve('Season', episode_context) == '1'
        assert resolver.resolve('Episode', episode_context) == '1'

    def test_absolute_episode(self, resolver):
        """Should resolve absolute episode numbers with padding."""
        episode = Episode(season_number=21, episode_number=1, absolute_episode_number=892)
        context = NamingContext(episodes=(episode,))

        assert resolver.resolve('Absolute Episode', context) == '892'
        assert resolver.resolve('Absolute Episode:0000', context) == '0892'

    def test_missing_absolute_episode_is_absent(self, resolver, episode_context):
        """Should resolve to None when no absolute number is known."""
        assert resolver.resolve('Absolute Episode:000', episode_context) is None

    def test_episode_title_joins_multi_episode_titles(self, resolver, multi_episode_context):
        """Should join distinct episode titles with ' + '."""
        value = resolver.resolve('Episode Title', multi_episode_context)

        assert value == "Pilot + Cat's in the Bag"

    def test_episode_title_skips_duplicates(self, resolver):
        """Should list a repeated title once."""
        context = NamingContext(episodes=(
            Episode(season_number=1, episode_number=1, title='Finale'),
            Episode(season_number=1, episode_number=2, title='Finale'),
        ))

        assert resolver.resolve('Episode Title', context) == 'Finale'

    def test_multi_episode_numbers_use_first_episode(self, resolver, multi_episode_context):
        """Should resolve episode numbers from the first episode."""
        assert resolver.resolve('Episode:00', multi_episode_context) == '01'

    def test_explicit_season_overrides_episode(self, resolver, episode_context):
        """Should prefer the explicit context season."""
        from dataclasses import replace

        context = replace(episode_context, season=3)

        assert resolver.resolve('Season:00', context) == '03'


class TestAirDateTokens:
    """Tests for air date tokens."""

    @pytest.mark.parametrize('token,expected', [
        ('Air Date', '2008-01-20'),
        ('Air-Date', '2008-01-20'),
        ('Air.Date', '2008.01.20'),
        ('Air_Date', '2008_01_20'),
    ])
    def test_separators(self, resolver, episode_context, token, expected):
        """Should substitute the separator into the ISO date."""
        assert resolver.resolve(token, episode_context) == expected

    def test_datetime_air_date(self, resolver):
        """Should drop the time part of a datetime."""
        episode = Episode(season_number=1, episode_number=1, air_date=datetime(2008, 1, 20, 21, 0))

        assert resolver.resolve('Air Date', NamingContext(episodes=(episode,))) == '2008-01-20'

    def test_missing_air_date(self, resolver):
        """Should resolve to None without an air date."""
        context = NamingContext(episodes=(Episode(season_number=1, episode_number=1),))

        assert resolver.resolve('Air Date', context) is None


class TestQualityTokens:
    """Tests for quality tokens."""

    def test_quality_full(self, resolver, episode_context):
        """Should resolve the quality name."""
        assert resolver.resolve('Quality Full', episode_context) == 'HDTV-720p'
        assert resolver.resolve('Quality Proper', episode_context) is None

    def test_proper_revision(self, resolver):
        """Should add 'Proper' when the revision is above 1."""
        context = NamingContext(quality=Quality(name='HDTV-720p', revision=2))

        assert resolver.resolve('Quality Full', context) == 'HDTV-720p Proper'
        assert resolver.resolve('Quality Proper', context) == 'Proper'
        assert resolver.resolve('Quality Title', context) == 'HDTV-720p'

    def test_real_flag(self, resolver):
        """Should add 'REAL' for real releases."""
        context = NamingContext(quality=Quality(name='WEBDL-1080p', is_real=True))

        assert resolver.resolve('Quality Full', context) == 'WEBDL-1080p REAL'
        assert resolver.resolve('Quality Real', context) == 'REAL'

    def test_include_quality_off(self, episode_context):
        """Should resolve quality tokens to None when switched off."""
        from src.core.config import NamingConfig

        resolver = TokenResolver(NamingConfig(include_quality=False))

        assert resolver.resolve('Quality Full', episode_context) is None
        assert resolver.resolve('Series Title', episode_context) == 'Breaking Bad'


class TestMediaInfoTokens:
    """Tests for media info tokens."""

    @pytest.fixture
    def context(self):
        """Context with probed media info."""
        return NamingContext(media_info=MediaInfo(
            video_codec='x264',
            video_bit_depth=10,
            video_dynamic_range='HDR',
            audio_codec='DTS',
            audio_channels='5.1',
            audio_languages=('en', 'de'),
            subtitle_languages=('en',)
        ))

    def test_simple_and_full(self, resolver, context):
        """Should combine codecs and languages."""
        assert resolver.resolve('MediaInfo Simple', context) == 'x264 DTS'
        assert resolver.resolve('MediaInfo Full', context) == 'x264 DTS [EN+DE] [EN]'

    def test_attributes(self, resolver, context):
        """Should resolve individual stream attributes."""
        assert resolver.resolve('MediaInfo VideoBitDepth', context) == '10'
        assert resolver.resolve('MediaInfo VideoDynamicRange', context) == 'HDR'
        assert resolver.resolve('MediaInfo AudioChannels', context) == '5.1'
        assert resolver.resolve('MediaInfo AudioLanguages', context) == 'EN+DE'

    def test_missing_media_info(self, resolver, episode_context):
        """Should resolve to None without media info."""
        assert resolver.resolve('MediaInfo Full', episode_context) is None


class TestReleaseTokens:
    """Tests for release tokens."""

    def test_release_group_and_hash(self, resolver):
        """Should resolve release info attributes."""
        context = NamingContext(release_info=ReleaseInfo(release_group='CTU', release_hash='ABCD1234'))

        assert resolver.resolve('Release Group', context) == 'CTU'
        assert resolver.resolve('Release Hash', context) == 'ABCD1234'

    def test_original_filename_strips_path_and_extension(self, resolver):
        """Should return the leaf name without extension."""
        context = NamingContext(original_file_name='downloads/tv/Breaking.Bad.S01E01.mkv')

        assert resolver.resolve('Original Filename', context) == 'Breaking.Bad.S01E01'

    def test_original_title_falls_back_to_movie(self, resolver):
        """Should use the movie's original title without a release title."""
        context = NamingContext(movie=Movie(title='Spirited Away', original_title='千と千尋の神隠し'))

        assert resolver.resolve('Original Title', context) == '千と千尋の神隠し'

    def test_edition_toggle(self):
        """Should resolve edition tokens only when enabled."""
        from src.core.config import NamingConfig

        context = NamingContext(release_info=ReleaseInfo(edition="Director's Cut"))

        assert TokenResolver(NamingConfig()).resolve('Edition Tags', context) == "Director's Cut"
        assert TokenResolver(NamingConfig(include_edition=False)).resolve('Edition', context) is None


class TestMovieAndIdTokens:
    """Tests for movie and external id tokens."""

    def test_movie_tokens(self, resolver, movie_context):
        """Should resolve movie title variants."""
        assert resolver.resolve('Movie Title', movie_context) == 'The Matrix'
        assert resolver.resolve('Movie TitleThe', movie_context) == 'Matrix, The'
        assert resolver.resolve('Movie TitleYear', movie_context) == 'The Matrix (1999)'
        assert resolver.resolve('Movie Year', movie_context) == '1999'
        assert resolver.resolve('Release Year', movie_context) == '1999'
        assert resolver.resolve('Year', movie_context) == '1999'
        assert resolver.resolve('Movie TitleFirstCharacter', movie_context) == 'T'

    def test_series_ids(self, resolver, episode_context):
        """Should resolve ids from the series record."""
        assert resolver.resolve('ImdbId', episode_context) == 'tt0903747'
        assert resolver.resolve('imdb-Id', episode_context) == 'imdb-tt0903747'
        assert resolver.resolve('TvdbId', episode_context) == '81189'
        assert resolver.resolve('tvdb-Id', episode_context) == 'tvdb-81189'
        assert resolver.resolve('TmdbId', episode_context) is None
        assert resolver.resolve('tmdb-Id', episode_context) is None

    def test_context_ids_override_records(self, resolver, episode_context):
        """Should prefer raw ids carried by the context."""
        from dataclasses import replace

        context = replace(episode_context, tvdb_id=12345, tmdb_id=1396)

        assert resolver.resolve('TvdbId', context) == '12345'
        assert resolver.resolve('tmdb-Id', context) == 'tmdb-1396'

    def test_air_date_on_movie_context_is_absent(self, resolver, movie_context):
        """Should resolve episode tokens to None for movies."""
        assert resolver.resolve('Air Date', movie_context) is None
        assert resolver.resolve('Season:00', movie_context) is None
        assert resolver.resolve('Episode Title', movie_context) is None

    def test_air_date_from_string(self, resolver):
        """Should accept an ISO string air date."""
        episode = Episode(season_number=1, episode_number=1, air_date=date(2013, 10, 11).isoformat())

        assert resolver.resolve('Air.Date', NamingContext(episodes=(episode,))) == '2013.10.11'
