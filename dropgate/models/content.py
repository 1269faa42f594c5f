import re
from dataclasses import dataclass
from typing import Optional, Pattern, Union

from flask_babel import gettext as _  # type: ignore

from dropgate.models.errors import FileSizeError, UnsupportedFileType
from dropgate.models.languages import DEFAULT_REGISTRY, LanguageRegistry
from dropgate.models.sizes import DEFAULT_SIZES, Sizes
from dropgate.utils.files import extname, normalize_extension
from dropgate.utils.log import log


DEFAULT_MIME_TYPE = 'application/octet-stream'

# Markdown is rendered as HTML before it is served, hence text/html.
MIME_TYPES = {
    **dict.fromkeys(
        ('.html', '.htm', '.htx', '.htmls', '.md', '.markdown'), 'text/html',
    ),
    '.css': 'text/css',
    '.js': 'text/javascript',
    '.txt': 'text/plain',
    '.svg': 'image/svg+xml',
    '.png': 'image/png',
    '.ico': 'image/x-icon',
    '.bmp': 'image/bmp',
    **dict.fromkeys(('.jpg', '.jpe', '.jpeg'), 'image/jpeg'),
    '.gif': 'image/gif',
    # Containers that hold either video or audio resolve to video.
    '.mp4': 'video/mp4',
    '.mpeg': 'video/mpeg',
    **dict.fromkeys(('.ogg', '.ogv'), 'video/ogg'),
    **dict.fromkeys(('.mov', '.qt'), 'video/quicktime'),
    '.webm': 'video/webm',
    **dict.fromkeys(('.avi', '.divx'), 'video/avi'),
    **dict.fromkeys(('.mpa', '.mp3'), 'audio/mpeg'),
    '.wav': 'audio/vnd.wave',
    '.eot': 'application/vnd.ms-fontobject',
    '.otf': 'application/x-font-opentype',
    '.ttf': 'application/x-font-ttf',
    '.woff': 'application/font-woff',
}

RESIZABLE_IMAGE_EXTENSIONS = frozenset({'.png', '.jpg', '.jpeg'})
ARCHIVE_EXTENSIONS = frozenset({'.zip', '.tar'})
IMAGE_LANGUAGES = frozenset({'image', 'svg'})

REMOTE_URL: Pattern = re.compile(r':?//')
DATA_URL: Pattern = re.compile(r'\s*data:')
BLOB_URL: Pattern = re.compile(r'^blob:')

Rejection = Optional[Union[FileSizeError, UnsupportedFileType]]


def _format_megabytes(size: int, mb: int) -> str:
    megabytes = size / mb
    if megabytes.is_integer():
        return str(int(megabytes))
    return str(megabytes)


@dataclass(frozen=True)
class Classification:
    extension: str
    mime: str
    language: str
    is_text: bool
    is_utf8: bool
    is_image: bool
    is_resizable_image: bool
    is_html: bool
    is_css: bool
    is_markdown: bool
    needs_rewriting: bool
    is_archive: bool


class ContentClassifier:
    """Answers what a file is and whether it may enter the workspace.

    Language families come from the injected registry, MIME types from the
    static :data:`MIME_TYPES` table and size thresholds from ``sizes``.
    Nothing here touches the filesystem or the network.
    """

    def __init__(
        self,
        registry: LanguageRegistry = DEFAULT_REGISTRY,
        sizes: Sizes = DEFAULT_SIZES,
    ):
        self.registry = registry
        self.sizes = sizes

    def _get_language_id(self, ext: Optional[str]) -> str:
        ext = normalize_extension(ext, language_aware=True)
        language = self.registry.get_language_for_extension(ext)
        return language.id if language else ''

    def is_image(self, ext: Optional[str]) -> bool:
        return self._get_language_id(ext) in IMAGE_LANGUAGES

    def is_resizable_image(self, ext: Optional[str]) -> bool:
        return normalize_extension(ext) in RESIZABLE_IMAGE_EXTENSIONS

    def is_html(self, ext: Optional[str]) -> bool:
        return self._get_language_id(ext) == 'html'

    def is_css(self, ext: Optional[str]) -> bool:
        return self._get_language_id(ext) == 'css'

    def is_markdown(self, ext: Optional[str]) -> bool:
        return self._get_language_id(ext) == 'markdown'

    def needs_rewriting(self, ext: Optional[str]) -> bool:
        return self.is_html(ext) or self.is_css(ext)

    def is_archive(self, ext: Optional[str]) -> bool:
        return normalize_extension(ext) in ARCHIVE_EXTENSIONS

    @staticmethod
    def mime_from_ext(ext: Optional[str]) -> str:
        return MIME_TYPES.get(normalize_extension(ext), DEFAULT_MIME_TYPE)

    @staticmethod
    def is_text_type(mime: Optional[str]) -> bool:
        return bool(mime) and mime.startswith('text')

    def is_utf8_encoded(self, ext: Optional[str]) -> bool:
        """Whether files with this extension can be read as UTF-8 text."""
        return self.is_text_type(self.mime_from_ext(ext))

    @staticmethod
    def is_relative_url(url: Optional[str]) -> bool:
        """Whether the URL is really a path into the workspace."""
        if not url:
            return False
        return not (REMOTE_URL.search(url) or DATA_URL.search(url))

    @staticmethod
    def is_blob_url(url: Optional[str]) -> bool:
        # e.g. blob:http://localhost:8000/bf64f1e0-044d-4673-ba7d-156251db09f8
        if not url:
            return False
        return BLOB_URL.match(url) is not None

    def get_size_limit(self, ext: Optional[str]) -> int:
        if self.is_resizable_image(ext):
            return self.sizes.resizable_image_file_limit
        if self.is_archive(ext):
            return self.sizes.archive_file_limit
        return self.sizes.regular_file_size_limit

    def should_reject_file(
        self, filename: Optional[str], size: Union[int, float],
    ) -> Rejection:
        """Decide whether a dropped file may be imported.

        Returns ``None`` when the file is accepted, otherwise the error
        describing why it was rejected. The size is checked before the type,
        so at most one error is ever returned.
        """
        ext = extname(filename)
        mime = self.mime_from_ext(ext)
        is_archive = self.is_archive(ext)

        size_limit = self.get_size_limit(ext)
        if size > size_limit:
            size_limit_mb = _format_megabytes(size_limit, self.sizes.mb)
            log.debug(
                f'Rejecting {filename}: {size} bytes over {size_limit}',
            )
            return FileSizeError(
                _(
                    'File exceeds maximum supported size: %(size)s MB',
                    size=size_limit_mb,
                ),
                limit=size_limit,
            )

        language = self.registry.get_language_for_extension(
            normalize_extension(ext, language_aware=True),
        )
        if language is not None or self.is_text_type(mime) or is_archive:
            return None

        log.debug(f'Rejecting {filename}: unsupported type {mime}')
        return UnsupportedFileType(_('Unsupported file type'))

    def is_image_too_large(self, byte_length: int) -> bool:
        return byte_length > self.sizes.resized_image_target_size

    def classify(self, filename: Optional[str]) -> Classification:
        ext = extname(filename)
        mime = self.mime_from_ext(ext)
        return Classification(
            extension=normalize_extension(ext) if ext else '',
            mime=mime,
            language=self._get_language_id(ext),
            is_text=self.is_text_type(mime),
            is_utf8=self.is_utf8_encoded(ext),
            is_image=self.is_image(ext),
            is_resizable_image=self.is_resizable_image(ext),
            is_html=self.is_html(ext),
            is_css=self.is_css(ext),
            is_markdown=self.is_markdown(ext),
            needs_rewriting=self.needs_rewriting(ext),
            is_archive=self.is_archive(ext),
        )


default_classifier = ContentClassifier()

is_image = default_classifier.is_image
is_resizable_image = default_classifier.is_resizable_image
is_html = default_classifier.is_html
is_css = default_classifier.is_css
is_markdown = default_classifier.is_markdown
needs_rewriting = default_classifier.needs_rewriting
is_archive = default_classifier.is_archive
mime_from_ext = default_classifier.mime_from_ext
is_text_type = default_classifier.is_text_type
is_utf8_encoded = default_classifier.is_utf8_encoded
is_relative_url = default_classifier.is_relative_url
is_blob_url = default_classifier.is_blob_url
should_reject_file = default_classifier.should_reject_file
is_image_too_large = default_classifier.is_image_too_large
classify = default_classifier.classify
