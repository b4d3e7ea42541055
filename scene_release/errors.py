"""
Exceptions for scene_release
"""


class SceneReleaseError(Exception):
    """Base class for scene_release errors"""
    pass


class SeasonNotFoundError(SceneReleaseError, LookupError):
    """No season-like token in a directory name"""

    def __init__(self, directory_name: str):
        self.directory_name = directory_name
        super().__init__(f"no season found in directory name: {directory_name!r}")
