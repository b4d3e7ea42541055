"""
Release assembly, path composition and directory parsing
"""
import logging
import re
from typing import Mapping, Optional

from .errors import SeasonNotFoundError
from .extractors import TagExtractor, TagScan, extract_title, normalize_path, normalize_release, split_path
from .extractors.title import title_bounds
from .models import ParsedRelease, PathInfo

logger = logging.getLogger(__name__)

SEASON_DIRECTORY_RE = re.compile(r'(?<![A-Za-z])Season[\s._-]*(\d{1,2})(?!\d)', re.IGNORECASE)
DRIVE_RE = re.compile(r'^[A-Za-z]:$')

DEFAULT_TAGS = TagExtractor()


class ReleaseParser:
    """Parse release names, paths and library directory names

    A parser only holds its compiled lookup tables, so one instance can be
    shared freely between threads.
    """

    def __init__(self, release_type: str = "movie", tokens: Optional[Mapping] = None):
        self.release_type = release_type
        self.tags = TagExtractor(tokens) if tokens else DEFAULT_TAGS

    def parse(self, release_name: str) -> ParsedRelease:
        """Run every tag pass in order and assemble the result"""
        release_name = release_name or ""
        scan = TagScan(normalize_release(release_name))

        fields = self.tags.extract_ids(scan)
        fields['edition'] = self.tags.extract_edition(scan)
        fields['year'] = self.tags.extract_year(scan)
        fields.update(self.tags.extract_episode(scan))
        fields['disc'] = self.tags.extract_disc(scan)
        fields['resolution'] = self.tags.extract_resolution(scan)

        self.tags.settle_region(scan)
        fields['source'] = self.tags.extract_source(scan)
        fields['streaming_provider'] = self.tags.extract_streaming_provider(scan)
        fields['audio'] = self.tags.extract_audio(scan)
        fields['hdr'] = self.tags.extract_hdr(scan)
        fields['format'] = self.tags.extract_format(scan)
        fields['language'] = self.tags.extract_language(scan)
        flags = self.tags.extract_flags(scan)
        fields['version'] = self.tags.extract_version(scan)
        fields['device'] = self.tags.extract_device(scan)
        fields['os'] = self.tags.extract_os(scan)
        self.tags.strip_checksum(scan)
        fields['group'] = self.tags.extract_group(scan)

        title_end = title_bounds(scan)[1]
        flags.extend(self.tags.extract_leftover_brackets(scan, title_end))
        fields['flags'] = _ordered_flags(flags)

        fields['title'], fields['title_extra'] = extract_title(scan)

        parsed = ParsedRelease(release=release_name, type=self.release_type, **fields)
        logger.debug(f"Parsed {release_name!r}: title={parsed.title!r} year={parsed.year} "
                     f"season={parsed.season} episode={parsed.episode}")
        return parsed

    def parse_path(self, file_path: str) -> PathInfo:
        """Parse the filename and its nearest non-season parent directory independently"""
        full_path = normalize_path(file_path or "")
        segments = split_path(full_path)
        if not segments:
            return PathInfo(file=self.parse(""), full_path=full_path)

        filename = segments[-1]
        parents = segments[:-1]

        season = None
        for segment in reversed(parents):
            season = self.parse_season_directory(segment)
            if season is not None:
                break

        directory_name = None
        for segment in reversed(parents):
            if self.parse_season_directory(segment) is not None:
                continue
            if not DRIVE_RE.match(segment):
                directory_name = segment
            break

        return PathInfo(
            file=self.parse(filename),
            full_path=full_path,
            directory=self.parse(directory_name) if directory_name else None,
            season=season,
        )

    def _parse_directory(self, directory_name: str, release_type: str) -> ParsedRelease:
        """Identity-only pass: ids, year and title"""
        directory_name = directory_name or ""
        scan = TagScan(normalize_release(directory_name))

        fields = self.tags.extract_ids(scan)
        fields['year'] = self.tags.extract_year(scan)
        fields['title'], _ = extract_title(scan)
        return ParsedRelease(release=directory_name, type=release_type, **fields)

    def parse_series_directory(self, directory_name: str) -> ParsedRelease:
        return self._parse_directory(directory_name, "series")

    def parse_movie_directory(self, directory_name: str) -> ParsedRelease:
        return self._parse_directory(directory_name, "movie")

    def parse_season_directory(self, directory_name: str) -> Optional[int]:
        """Season number of a "Season NN" directory, None when there is none"""
        match = SEASON_DIRECTORY_RE.search(directory_name or "")
        if not match:
            return None
        return int(match.group(1))

    def require_season_directory(self, directory_name: str) -> int:
        season = self.parse_season_directory(directory_name)
        if season is None:
            raise SeasonNotFoundError(directory_name)
        return season


def _ordered_flags(found) -> tuple:
    """Flags in input order with duplicates dropped"""
    flags = []
    for _, flag in sorted(found, key=lambda item: item[0]):
        if flag and flag not in flags:
            flags.append(flag)
    return tuple(flags)


def parse(release_type: str, release_name: str) -> ParsedRelease:
    """Parse a scene release name"""
    return ReleaseParser(release_type).parse(release_name)


def parse_path(release_type: str, file_path: str) -> PathInfo:
    """Parse a file path into directory, season and file information"""
    return ReleaseParser(release_type).parse_path(file_path)


def parse_series_directory(directory_name: str) -> ParsedRelease:
    """Extract title, year and metadata ids from a series directory name"""
    return ReleaseParser("series").parse_series_directory(directory_name)


def parse_movie_directory(directory_name: str) -> ParsedRelease:
    """Extract title, year and metadata ids from a movie directory name"""
    return ReleaseParser("movie").parse_movie_directory(directory_name)


def parse_season_directory(directory_name: str) -> Optional[int]:
    """Season number from a directory like "Season 01", or None"""
    return ReleaseParser("tv").parse_season_directory(directory_name)


def require_season_directory(directory_name: str) -> int:
    """Like parse_season_directory but raises SeasonNotFoundError"""
    return ReleaseParser("tv").require_season_directory(directory_name)
