import os

from dropgate.utils.consts import KB, MB


SECRET_KEY = os.getenv('SECRET_KEY', 'dropgate-development-key')

LOCALE = os.getenv('LOCALE', 'en')
LANGUAGES = ('en', 'he')

# Byte thresholds for imported files
RESIZABLE_IMAGE_FILE_LIMIT = int(
    os.getenv('RESIZABLE_IMAGE_FILE_LIMIT', 10 * MB),
)
ARCHIVE_FILE_LIMIT = int(os.getenv('ARCHIVE_FILE_LIMIT', 20 * MB))
REGULAR_FILE_SIZE_LIMIT = int(os.getenv('REGULAR_FILE_SIZE_LIMIT', 5 * MB))
RESIZED_IMAGE_TARGET_SIZE = int(
    os.getenv('RESIZED_IMAGE_TARGET_SIZE', 250 * KB),
)

MAX_CONTENT_LENGTH = max(
    RESIZABLE_IMAGE_FILE_LIMIT, ARCHIVE_FILE_LIMIT, REGULAR_FILE_SIZE_LIMIT,
) + MB
