"""
Normalization, tag and title extraction passes
"""
from .normalizer import normalize_path, normalize_release, split_path
from .tags import TagExtractor, TagScan
from .title import clean_title, extract_title

__all__ = [
    'TagExtractor', 'TagScan', 'clean_title', 'extract_title',
    'normalize_path', 'normalize_release', 'split_path',
]
