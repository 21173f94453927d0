"""
Tests unitaires pour le resolveur de visuels de saison.

Tests couvrant:
- Filtrage par numero de saison (saisons malformees ignorees)
- Conversion en ImageCandidate (dimensions fixes, https, likes)
- Paliers de langue
- Classement stable par largeur, langue, likes, votes
"""

import pytest

from seasonart.core.entities.series_document import (
    RawImageEntry,
    SeriesMetadataDocument,
)
from seasonart.core.value_objects.artwork import (
    ArtworkCategory,
    ImageCandidate,
    ImageType,
    RatingType,
)
from seasonart.services.season_image_resolver import (
    SeasonImageResolver,
    collect_season_candidates,
    entry_matches_season,
    language_tier,
    rank_candidates,
    ranking_key,
)


# ====================
# Helpers
# ====================


def make_document(**lists: list[dict]) -> SeriesMetadataDocument:
    """Construit un document depuis des listes JSON nommees comme chez fanart.tv."""
    return SeriesMetadataDocument.from_json(lists)


def make_candidate(
    width: int = 1000,
    language: str = "",
    rating=None,
    votes=None,
    url: str = "https://x/a.jpg",
) -> ImageCandidate:
    """Candidat PRIMARY minimal pour les tests de classement."""
    return ImageCandidate(
        image_type=ImageType.PRIMARY,
        width=width,
        height=1426,
        provider_name="Fanart",
        url=url,
        language=language,
        community_rating=rating,
        vote_count=votes,
    )


@pytest.fixture
def resolver() -> SeasonImageResolver:
    """Resolveur sans etat."""
    return SeasonImageResolver()


# ====================
# Filtrage
# ====================


class TestEntryMatchesSeason:
    """Tests pour entry_matches_season."""

    def test_matching_season(self) -> None:
        entry = RawImageEntry(url="http://x/a.jpg", season="2")
        assert entry_matches_season(entry, 2) is True

    def test_other_season(self) -> None:
        entry = RawImageEntry(url="http://x/a.jpg", season="3")
        assert entry_matches_season(entry, 2) is False

    def test_empty_url_is_rejected(self) -> None:
        entry = RawImageEntry(url="", season="2")
        assert entry_matches_season(entry, 2) is False

    def test_empty_season_is_rejected(self) -> None:
        """Une saison vide ne correspond pas, meme a la saison 0."""
        entry = RawImageEntry(url="http://x/a.jpg", season="")
        assert entry_matches_season(entry, 0) is False

    @pytest.mark.parametrize("season", ["all", "1,0", "1.0", "1 0", "١", "2_0", "0x2"])
    def test_unparsable_season_is_rejected(self, season: str) -> None:
        entry = RawImageEntry(url="http://x/a.jpg", season=season)
        assert entry_matches_season(entry, 1) is False
        assert entry_matches_season(entry, 2) is False

    def test_specials_season_zero(self) -> None:
        entry = RawImageEntry(url="http://x/a.jpg", season="0")
        assert entry_matches_season(entry, 0) is True


class TestCollectSeasonCandidates:
    """Tests pour collect_season_candidates."""

    def test_absent_document_returns_empty(self) -> None:
        assert collect_season_candidates(None, 1) == []

    def test_only_requested_season_is_kept(
        self, series_document: SeriesMetadataDocument
    ) -> None:
        """Chaque candidat provient d'une entree de la saison demandee."""
        season_urls = {
            entry.url.replace("http://", "https://")
            for category in ArtworkCategory
            for entry in series_document.entries(category)
            if entry.season == "2"
        }

        candidates = collect_season_candidates(series_document, 2)

        assert len(candidates) == 5
        assert {c.url for c in candidates} == season_urls

    def test_category_order_then_document_order(
        self, series_document: SeriesMetadataDocument
    ) -> None:
        candidates = collect_season_candidates(series_document, 2)

        assert [c.image_type for c in candidates] == [
            ImageType.PRIMARY,
            ImageType.PRIMARY,
            ImageType.BANNER,
            ImageType.THUMB,
            ImageType.BACKDROP,
        ]
        assert candidates[0].language == "fr"
        assert candidates[1].language == "en"

    @pytest.mark.parametrize(
        "category, image_type, width, height",
        [
            ("seasonposter", ImageType.PRIMARY, 1000, 1426),
            ("seasonbanner", ImageType.BANNER, 1000, 185),
            ("seasonthumb", ImageType.THUMB, 500, 281),
            ("showbackground", ImageType.BACKDROP, 1920, 1080),
        ],
    )
    def test_dimensions_are_fixed_per_category(
        self, category: str, image_type: ImageType, width: int, height: int
    ) -> None:
        document = make_document(
            **{category: [{"url": "http://x/a.jpg", "season": "1", "width": "42"}]}
        )

        [candidate] = collect_season_candidates(document, 1)

        assert candidate.image_type == image_type
        assert (candidate.width, candidate.height) == (width, height)

    def test_candidate_fields(self) -> None:
        document = make_document(
            seasonposter=[
                {"url": "http://x/a.jpg", "season": "2", "lang": "en", "likes": "10"}
            ]
        )

        [candidate] = collect_season_candidates(document, 2)

        assert candidate.provider_name == "Fanart"
        assert candidate.url == "https://x/a.jpg"
        assert candidate.language == "en"
        assert candidate.community_rating == 10
        assert candidate.vote_count is None
        assert candidate.rating_type == RatingType.LIKES

    @pytest.mark.parametrize("likes", ["abc", "", "1,000", "1.000", "1 000", "1_000"])
    def test_unparsable_likes_leaves_rating_absent(self, likes: str) -> None:
        """Des likes illisibles donnent un rating absent, pas zero."""
        document = make_document(
            seasonposter=[{"url": "http://x/a.jpg", "season": "1", "likes": likes}]
        )

        [candidate] = collect_season_candidates(document, 1)

        assert candidate.community_rating is None

    def test_missing_likes_leaves_rating_absent(self) -> None:
        document = make_document(seasonposter=[{"url": "http://x/a.jpg", "season": "1"}])

        [candidate] = collect_season_candidates(document, 1)

        assert candidate.community_rating is None
        assert candidate.language == ""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("http://x/a.jpg", "https://x/a.jpg"),
            ("HTTP://x/a.jpg", "https://x/a.jpg"),
            ("Http://x/a.jpg", "https://x/a.jpg"),
            ("https://x/a.jpg", "https://x/a.jpg"),
            ("ftp://x/a.jpg", "ftp://x/a.jpg"),
            ("//x/a.jpg", "//x/a.jpg"),
        ],
    )
    def test_url_scheme_normalization(self, url: str, expected: str) -> None:
        document = make_document(seasonthumb=[{"url": url, "season": "1"}])

        [candidate] = collect_season_candidates(document, 1)

        assert candidate.url == expected

    def test_document_is_not_mutated(
        self, series_document: SeriesMetadataDocument
    ) -> None:
        before = {c: series_document.entries(c) for c in ArtworkCategory}

        collect_season_candidates(series_document, 2)

        assert {c: series_document.entries(c) for c in ArtworkCategory} == before


# ====================
# Paliers de langue
# ====================


class TestLanguageTier:
    """Tests pour language_tier."""

    @pytest.mark.parametrize(
        "language, preferred, expected",
        [
            ("fr", "fr", 3),
            ("FR", "fr", 3),
            ("fr", "FR", 3),
            ("en", "en", 3),
            ("en", "fr", 2),
            ("EN", "de", 2),
            ("", "fr", 2),
            ("", "en", 3),
            ("", "EN", 3),
            (None, "en", 3),
            ("de", "fr", 0),
            ("fr", "en", 0),
            ("00", "fr", 0),
        ],
    )
    def test_tiers(self, language, preferred: str, expected: int) -> None:
        assert language_tier(language, preferred) == expected

    def test_untagged_equals_exact_match_for_english(self) -> None:
        """Image sans langue et image anglaise sont a egalite pour une demande en anglais."""
        assert language_tier("", "en") == language_tier("en", "en")

    @pytest.mark.parametrize(
        "language, expected", [("", 2), (None, 2), ("en", 2), ("fr", 0)]
    )
    def test_no_preferred_language(self, language, expected: int) -> None:
        """Sans langue demandee, une image sans langue reste au palier 2."""
        assert language_tier(language, None) == expected


# ====================
# Classement
# ====================


class TestRankCandidates:
    """Tests pour rank_candidates."""

    def test_width_first(self) -> None:
        small = make_candidate(width=500, language="fr")
        large = make_candidate(width=1000, language="fr")

        ranked = rank_candidates([small, large], "fr")

        assert [c.width for c in ranked] == [1000, 500]

    def test_width_beats_language(self) -> None:
        wide_other = make_candidate(width=1920, language="de")
        narrow_preferred = make_candidate(width=500, language="fr")

        ranked = rank_candidates([narrow_preferred, wide_other], "fr")

        assert ranked == [wide_other, narrow_preferred]

    def test_language_before_rating(self) -> None:
        popular_english = make_candidate(language="en", rating=100)
        preferred = make_candidate(language="fr", rating=1)
        other = make_candidate(language="de", rating=500)

        ranked = rank_candidates([other, popular_english, preferred], "fr")

        assert ranked == [preferred, popular_english, other]

    def test_rating_then_votes(self) -> None:
        low = make_candidate(language="fr", rating=1, votes=50)
        high = make_candidate(language="fr", rating=9)
        high_more_votes = make_candidate(language="fr", rating=9, votes=3)

        ranked = rank_candidates([low, high, high_more_votes], "fr")

        assert ranked == [high_more_votes, high, low]

    def test_absent_rating_counts_as_zero(self) -> None:
        absent = make_candidate(language="fr", rating=None, url="https://x/1.jpg")
        zero = make_candidate(language="fr", rating=0, url="https://x/2.jpg")

        assert rank_candidates([absent, zero], "fr") == [absent, zero]
        assert rank_candidates([zero, absent], "fr") == [zero, absent]

    def test_absent_width_counts_as_zero(self) -> None:
        unknown = make_candidate(width=None)
        thumb = make_candidate(width=500)

        assert rank_candidates([unknown, thumb], "en") == [thumb, unknown]

    def test_english_and_untagged_tie_keeps_input_order(self) -> None:
        """
        Demande non anglaise : "en" et "" sont tous deux au palier 2.

        A egalite, l'ordre d'entree est conserve.
        """
        english = make_candidate(language="en", url="https://x/en.jpg")
        untagged = make_candidate(language="", url="https://x/none.jpg")

        assert rank_candidates([english, untagged], "de") == [english, untagged]
        assert rank_candidates([untagged, english], "de") == [untagged, english]

    def test_ranking_is_monotonic(
        self, series_document: SeriesMetadataDocument
    ) -> None:
        candidates = collect_season_candidates(series_document, 2)

        ranked = rank_candidates(candidates, "fr")
        keys = [ranking_key(c, "fr") for c in ranked]

        assert keys == sorted(keys, reverse=True)

    def test_empty_input(self) -> None:
        assert rank_candidates([], "fr") == []


# ====================
# SeasonImageResolver
# ====================


class TestSeasonImageResolver:
    """Tests de bout en bout du resolveur."""

    def test_absent_document(self, resolver: SeasonImageResolver) -> None:
        assert resolver.resolve(None, 1, "en") == []
        assert resolver.resolve(None, 0, "fr") == []

    def test_single_matching_poster(self, resolver: SeasonImageResolver) -> None:
        document = make_document(
            seasonposter=[
                {"url": "http://x/a.jpg", "season": "2", "lang": "en", "likes": "10"}
            ],
            showbackground=[
                {"url": "http://x/b.jpg", "season": "3", "lang": "de", "likes": "5"}
            ],
        )

        result = resolver.resolve(document, 2, "en")

        assert result == [
            ImageCandidate(
                image_type=ImageType.PRIMARY,
                width=1000,
                height=1426,
                provider_name="Fanart",
                url="https://x/a.jpg",
                language="en",
                community_rating=10,
                vote_count=None,
            )
        ]

    def test_full_document_in_french(
        self, resolver: SeasonImageResolver, series_document: SeriesMetadataDocument
    ) -> None:
        result = resolver.resolve(series_document, 2, "fr")

        assert [(c.image_type, c.language) for c in result] == [
            (ImageType.BACKDROP, ""),
            (ImageType.PRIMARY, "fr"),
            (ImageType.PRIMARY, "en"),
            (ImageType.BANNER, "en"),
            (ImageType.THUMB, "de"),
        ]

    def test_full_document_in_english(
        self, resolver: SeasonImageResolver, series_document: SeriesMetadataDocument
    ) -> None:
        result = resolver.resolve(series_document, 2, "en")

        assert [(c.image_type, c.language) for c in result] == [
            (ImageType.BACKDROP, ""),
            (ImageType.PRIMARY, "en"),
            (ImageType.BANNER, "en"),
            (ImageType.PRIMARY, "fr"),
            (ImageType.THUMB, "de"),
        ]

    def test_resolve_is_idempotent(
        self, resolver: SeasonImageResolver, series_document: SeriesMetadataDocument
    ) -> None:
        first = resolver.resolve(series_document, 2, "fr")
        second = resolver.resolve(series_document, 2, "fr")

        assert first == second

    def test_unknown_season(
        self, resolver: SeasonImageResolver, series_document: SeriesMetadataDocument
    ) -> None:
        assert resolver.resolve(series_document, 9, "en") == []
