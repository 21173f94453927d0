"""
Fixtures pytest partagees pour les tests SeasonArt.

Ce module contient les fixtures communes utilisees dans les tests:
- Documents fanart.tv construits depuis les reponses simulees
- Mock du magasin de documents (ISeriesMetadataStore)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from seasonart.config import Settings
from seasonart.core.entities.series_document import SeriesMetadataDocument
from seasonart.core.ports.metadata_store import FetchStatus, ISeriesMetadataStore
from tests.fixtures.fanart_responses import FANART_SERIES_RESPONSE


@pytest.fixture
def series_document() -> SeriesMetadataDocument:
    """Document fanart.tv de Breaking Bad (reponse simulee)."""
    return SeriesMetadataDocument.from_json(FANART_SERIES_RESPONSE)


@pytest.fixture
def mock_metadata_store(series_document: SeriesMetadataDocument) -> MagicMock:
    """
    Mock de ISeriesMetadataStore pour les tests.

    Par defaut le document est deja en cache et lisible.
    """
    mock = MagicMock(spec=ISeriesMetadataStore)
    mock.ensure_cached = AsyncMock(return_value=FetchStatus.CACHED)
    mock.read_cached = AsyncMock(return_value=series_document)
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le cache et les logs.
    """
    return Settings(
        fanart_api_key="test-api-key",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "logs" / "test.log",
    )
