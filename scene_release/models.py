"""
Data models for scene_release
"""
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ParsedRelease:
    """Structured metadata extracted from a release name"""
    release: str = ""
    title: str = ""
    title_extra: str = ""
    group: str = ""
    year: Optional[int] = None
    date: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    episodes: Tuple[int, ...] = ()
    disc: Optional[int] = None
    flags: Tuple[str, ...] = ()
    source: str = ""
    format: str = ""
    resolution: str = ""
    audio: str = ""
    device: str = ""
    os: str = ""
    version: str = ""
    language: Mapping[str, str] = field(default_factory=dict, hash=False)
    tmdb_id: Optional[str] = None
    tvdb_id: Optional[str] = None
    imdb_id: Optional[str] = None
    edition: Optional[str] = None
    hdr: str = ""
    streaming_provider: str = ""
    type: str = ""

    def __post_init__(self):
        # Read-only view so the record stays immutable
        object.__setattr__(self, 'language', MappingProxyType(dict(self.language)))

    @property
    def is_tv(self) -> bool:
        """Check if any episode numbering was found"""
        return bool(self.season is not None or self.episode is not None
                    or self.episodes or self.date)

    @property
    def is_multi_episode(self) -> bool:
        return len(self.episodes) > 1

    @property
    def is_4k(self) -> bool:
        """Check if resolution is 4K"""
        return self.resolution == '2160p'

    @property
    def is_hdr(self) -> bool:
        """Check if content has HDR"""
        return bool(self.hdr)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict view with lists instead of tuples"""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['episodes'] = list(self.episodes)
        data['flags'] = list(self.flags)
        data['language'] = dict(self.language)
        return data


@dataclass(frozen=True)
class PathInfo:
    """Composite result for a filesystem path"""
    file: ParsedRelease
    full_path: str
    directory: Optional[ParsedRelease] = None
    season: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'directory': self.directory.to_dict() if self.directory else None,
            'season': self.season,
            'file': self.file.to_dict(),
            'full_path': self.full_path,
        }
