import os
from typing import Optional


EXTENSION_SEPARATOR = '.'

# Spellings the language registry only knows under another extension.
EXTENSION_ALIASES = {
    '.jpe': '.jpeg',
    '.htmls': '.html',
    '.htx': '.html',
    '.markdown': '.md',
    '.mdown': '.md',
    '.yml': '.yaml',
}


def extname(path: Optional[str]) -> str:
    if not path:
        return ''
    _, ext = os.path.splitext(os.path.basename(path))
    return ext


def normalize_extension(
    ext: Optional[str], language_aware: bool = False,
) -> str:
    ext = (ext or '').strip().lower()
    if not ext.startswith(EXTENSION_SEPARATOR):
        ext = f'{EXTENSION_SEPARATOR}{ext}'
    if language_aware:
        return EXTENSION_ALIASES.get(ext, ext)
    return ext
