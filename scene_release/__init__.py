"""
scene_release - structured metadata from scene release names and paths
"""
from .errors import SceneReleaseError, SeasonNotFoundError
from .models import ParsedRelease, PathInfo
from .parser import (
    ReleaseParser,
    parse,
    parse_movie_directory,
    parse_path,
    parse_season_directory,
    parse_series_directory,
    require_season_directory,
)

__version__ = "0.1.0"

__all__ = [
    'ParsedRelease', 'PathInfo', 'ReleaseParser',
    'SceneReleaseError', 'SeasonNotFoundError',
    'parse', 'parse_path', 'parse_series_directory', 'parse_movie_directory',
    'parse_season_directory', 'require_season_directory',
]
