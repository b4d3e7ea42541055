"""
Title extraction from what the tag passes left over
"""
import re
from typing import Tuple

from .tags import OPENING_BRACKET_RE, TagScan

WHITESPACE_RE = re.compile(r'\s+')
EMPTY_BRACKETS_RE = re.compile(r'[\[\(\{]\s*[\]\)\}]')
LEADING_JUNK_RE = re.compile(r'^[\s._\-~|:\)\]\}]+')
TRAILING_JUNK_RE = re.compile(r'[\s._\-~|:\(\[\{]+$')


def clean_title(region: str) -> str:
    """Turn a raw title region into display text

    Dotted scene names ("The.Matrix") use dots as word separators, names that
    already contain spaces keep their dots ("Mr. Robot").
    """
    if not region or not region.strip():
        return ""

    title = region.replace('_', ' ')
    if ' ' not in title.strip():
        title = title.replace('.', ' ')

    title = EMPTY_BRACKETS_RE.sub(' ', title)
    title = WHITESPACE_RE.sub(' ', title)
    title = LEADING_JUNK_RE.sub('', title)
    title = TRAILING_JUNK_RE.sub('', title)
    return title.strip()


def title_bounds(scan: TagScan) -> Tuple[int, int]:
    """Start and end offsets of the title region"""
    prefix = scan.span('prefix')
    start = prefix[1] if prefix else 0
    end = scan.first_start(after=start, exclude=('prefix',))
    return start, end


def extract_title(scan: TagScan) -> Tuple[str, str]:
    """Title and the episode subtitle that follows the episode marker"""
    start, end = title_bounds(scan)
    title = clean_title(scan.text[start:end])

    title_extra = ""
    marker = scan.span('episode')
    if marker:
        extra_end = scan.first_start(after=marker[1])
        region = scan.text[marker[1]:extra_end]
        bracket = OPENING_BRACKET_RE.search(region)
        if bracket:
            region = region[:bracket.start()]
        title_extra = clean_title(region)

    return title, title_extra
