import os
from typing import Dict, Optional

import pytest
from flask.testing import FlaskClient

# Tests log to stderr only, before any dropgate module adds a file sink.
os.environ.setdefault('DROPGATE_LOG_FILE', '')

from dropgate.models.content import ContentClassifier  # NOQA: E402
from dropgate.models.languages import Language  # NOQA: E402
from dropgate.models.sizes import Sizes  # NOQA: E402
from dropgate.utils.consts import KB, MB  # NOQA: E402
from dropgate.web import webapp  # NOQA: E402


class FakeRegistry:
    def __init__(self, families: Dict[str, str]):
        self.families = families
        self.lookups = []

    def get_language_for_extension(self, ext: str) -> Optional[Language]:
        self.lookups.append(ext)
        family = self.families.get(ext)
        if family is None:
            return None
        return Language(family, family.title(), (ext,))


SMALL_SIZES = Sizes(
    resizable_image_file_limit=3 * MB,
    archive_file_limit=int(2.5 * MB),
    regular_file_size_limit=1 * MB,
    resized_image_target_size=100 * KB,
)


@pytest.fixture(autouse=True)
def app_context():
    with webapp.app_context():
        yield


@pytest.fixture()
def client() -> FlaskClient:
    return webapp.test_client()


@pytest.fixture()
def fake_registry() -> FakeRegistry:
    return FakeRegistry({
        '.png': 'image',
        '.svg': 'svg',
        '.page': 'html',
        '.style': 'css',
        '.notes': 'markdown',
    })


@pytest.fixture()
def classifier(fake_registry: FakeRegistry) -> ContentClassifier:
    return ContentClassifier(registry=fake_registry, sizes=SMALL_SIZES)
