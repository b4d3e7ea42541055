"""
Input canonicalization for release names and paths
"""
import re
from typing import List

MEDIA_EXTENSIONS = (
    'mkv', 'mp4', 'm4v', 'avi', 'ts', 'm2ts', 'wmv', 'mov', 'mpg', 'mpeg',
    'webm', 'flv', 'iso', 'vob', 'srt', 'ass', 'ssa', 'sub', 'idx', 'nfo',
)

EXTENSION_RE = re.compile(r'\.(?:' + '|'.join(MEDIA_EXTENSIONS) + r')$', re.IGNORECASE)
WHITESPACE_RE = re.compile(r'\s+')
SLASHES_RE = re.compile(r'/{2,}')


def normalize_release(text: str) -> str:
    """Trim whitespace, collapse inner runs and drop a media file extension"""
    if not text:
        return ""
    text = WHITESPACE_RE.sub(' ', text).strip()
    return EXTENSION_RE.sub('', text).rstrip()


def normalize_path(path: str) -> str:
    """Unify separators to forward slashes, keeping a UNC ``//`` prefix"""
    if not path:
        return ""
    path = path.replace('\\', '/')
    if path.startswith('//'):
        return '//' + SLASHES_RE.sub('/', path.lstrip('/'))
    return SLASHES_RE.sub('/', path)


def split_path(path: str) -> List[str]:
    """Non-empty segments of a path, in order"""
    return [segment for segment in normalize_path(path).split('/') if segment.strip()]
