import os
from typing import Optional

from flask_babel import gettext as _  # type: ignore
from werkzeug.datastructures import FileStorage

from dropgate.models.content import (
    Classification, ContentClassifier, default_classifier,
)
from dropgate.models.errors import UnsupportedFileType
from dropgate.utils.log import log


def get_upload_size(storage: FileStorage) -> int:
    cursor_position = storage.stream.tell()
    storage.stream.seek(0, os.SEEK_END)
    size = storage.stream.tell()
    storage.stream.seek(cursor_position)
    return size


def check_upload(
    storage: FileStorage,
    classifier: Optional[ContentClassifier] = None,
) -> Classification:
    classifier = classifier or default_classifier
    if not storage.filename:
        raise UnsupportedFileType(_('Unsupported file type'))

    size = get_upload_size(storage)
    error = classifier.should_reject_file(storage.filename, size)
    if error is not None:
        raise error

    log.debug(f'Accepted upload {storage.filename} ({size} bytes)')
    return classifier.classify(storage.filename)
