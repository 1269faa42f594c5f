from dataclasses import dataclass
from typing import Any, Mapping

from dropgate.utils.consts import KB, MB


@dataclass(frozen=True)
class Sizes:
    resizable_image_file_limit: int = 10 * MB
    archive_file_limit: int = 20 * MB
    regular_file_size_limit: int = 5 * MB
    # Upper bound for an image after it was resized, not for the upload.
    resized_image_target_size: int = 250 * KB
    mb: int = MB

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'Sizes':
        defaults = cls()
        return cls(
            resizable_image_file_limit=int(config.get(
                'RESIZABLE_IMAGE_FILE_LIMIT',
                defaults.resizable_image_file_limit,
            )),
            archive_file_limit=int(config.get(
                'ARCHIVE_FILE_LIMIT', defaults.archive_file_limit,
            )),
            regular_file_size_limit=int(config.get(
                'REGULAR_FILE_SIZE_LIMIT', defaults.regular_file_size_limit,
            )),
            resized_image_target_size=int(config.get(
                'RESIZED_IMAGE_TARGET_SIZE',
                defaults.resized_image_target_size,
            )),
        )


DEFAULT_SIZES = Sizes()
