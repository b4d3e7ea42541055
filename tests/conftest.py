"""
Shared fixtures for scene_release tests
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scene_release import ReleaseParser


@pytest.fixture
def tv_parser():
    return ReleaseParser("tv")


@pytest.fixture
def movie_parser():
    return ReleaseParser("movie")
