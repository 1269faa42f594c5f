"""Language registry the classifier asks about normalized extensions.

The registry is the only place that knows which extensions belong to which
language family. Anything implementing :class:`LanguageRegistry` can be
handed to :class:`dropgate.models.content.ContentClassifier`.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Protocol, Tuple

from dropgate.utils.files import normalize_extension


@dataclass(frozen=True)
class Language:
    id: str
    name: str
    extensions: Tuple[str, ...] = field(default_factory=tuple)


class LanguageRegistry(Protocol):
    def get_language_for_extension(self, ext: str) -> Optional[Language]:
        ...


LANGUAGES = (
    Language('html', 'HTML', ('.html', '.htm', '.xhtml')),
    Language('css', 'CSS', ('.css',)),
    Language('markdown', 'Markdown', ('.md', '.markdown')),
    Language('javascript', 'JavaScript', ('.js', '.mjs')),
    Language('json', 'JSON', ('.json',)),
    Language('xml', 'XML', ('.xml',)),
    Language('text', 'Text', ('.txt',)),
    Language('svg', 'SVG', ('.svg',)),
    Language('image', 'Image', (
        '.png', '.jpg', '.jpeg', '.gif', '.ico', '.bmp', '.webp',
    )),
    Language('audio', 'Audio', ('.mp3', '.wav', '.aif', '.aiff')),
    Language('video', 'Video', ('.mp4', '.webm', '.ogv', '.ogg', '.mov')),
)


class ExtensionRegistry:
    def __init__(self, languages: Iterable[Language] = LANGUAGES):
        self._by_extension: Dict[str, Language] = {}
        for language in languages:
            for ext in language.extensions:
                self._by_extension[normalize_extension(ext)] = language

    def get_language_for_extension(self, ext: str) -> Optional[Language]:
        return self._by_extension.get(normalize_extension(ext))


DEFAULT_REGISTRY = ExtensionRegistry()
