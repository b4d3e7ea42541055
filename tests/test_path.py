"""
Path composition tests
"""
from scene_release import ReleaseParser, parse_path


class TestParsePath:
    """Splitting paths into directory, season and file"""

    def test_tv_path_with_season_directory(self):
        result = parse_path("tv", "/tv/Show (2010)/Season 01/Show - S01E01 - Pilot.mkv")

        assert result.season == 1
        assert result.full_path == "/tv/Show (2010)/Season 01/Show - S01E01 - Pilot.mkv"
        assert result.file.title == "Show"
        assert result.file.season == 1
        assert result.file.episode == 1
        assert result.file.title_extra == "Pilot"
        assert result.file.release == "Show - S01E01 - Pilot.mkv"
        assert result.directory.title == "Show"
        assert result.directory.year == 2010
        assert result.directory.type == "tv"

    def test_tv_path_without_season_directory(self):
        result = parse_path("tv", "/tv/Show (2010)/Show - S01E01 - Pilot.mkv")

        assert result.season is None
        assert result.file.season == 1
        assert result.file.episode == 1
        assert result.directory.title == "Show"

    def test_movie_path(self):
        result = parse_path("movie", "/movies/Matrix, The (1999)/Matrix, The (1999) [1080p].mkv")

        assert result.season is None
        assert result.file.title == "Matrix, The"
        assert result.file.year == 1999
        assert result.file.resolution == "1080p"
        assert result.directory.title == "Matrix, The"
        assert result.directory.year == 1999

    def test_episode_range(self):
        result = parse_path("tv", "/tv/Show (2010)/Season 01/Show - S01E01-E03 - Multi.mkv")

        assert result.season == 1
        assert result.file.season == 1
        assert result.file.episode is None
        assert result.file.episodes == (1, 2, 3)

    def test_tmdb_id_in_both_segments(self):
        result = parse_path("movie", "/movies/Vanilla Sky (2001) {tmdb-1903}/"
                                     "Vanilla Sky (2001) {tmdb-1903} [Remux-2160p].mkv")

        assert result.directory.tmdb_id == "1903"
        assert result.file.tmdb_id == "1903"
        assert result.file.source == "Remux"

    def test_imdb_id_stays_with_its_segment(self):
        result = parse_path("movie", "/movies/Matrix (1999) {imdb-tt0133093}/Matrix (1999) [Bluray-1080p].mkv")

        assert result.directory.title == "Matrix"
        assert result.directory.imdb_id == "tt0133093"
        assert result.file.title == "Matrix"
        assert result.file.imdb_id is None

    def test_edition(self):
        result = parse_path("movie", "/movies/Matrix (1999)/Matrix (1999) {edition-Director's Cut} [Bluray-1080p].mkv")

        assert result.file.edition == "Director's Cut"
        assert result.directory.edition is None

    def test_streaming_provider(self):
        result = parse_path("tv", "/tv/Show (2020)/Season 1/Show - S01E01 [AMZN WEBDL-1080p].mkv")

        assert result.season == 1
        assert result.file.streaming_provider == "AMZN"
        assert result.file.source == "WEBDL"
        assert result.file.resolution == "1080p"

    def test_windows_path(self):
        result = parse_path("tv", "C:\\tv\\Show (2020)\\Season 01\\Show - S01E01.mkv")

        assert result.season == 1
        assert result.full_path == "C:/tv/Show (2020)/Season 01/Show - S01E01.mkv"
        assert result.directory.title == "Show"
        assert result.directory.year == 2020
        assert result.file.episode == 1

    def test_unc_path(self):
        result = parse_path("movie", "\\\\server\\share\\Movies\\Heat (1995)\\Heat (1995) [Bluray-1080p].mkv")

        assert result.full_path == "//server/share/Movies/Heat (1995)/Heat (1995) [Bluray-1080p].mkv"
        assert result.directory.title == "Heat"
        assert result.directory.year == 1995
        assert result.file.resolution == "1080p"

    def test_windows_and_posix_agree(self):
        windows = parse_path("tv", "tv\\Show (2020)\\Season 02\\Show - S02E03.mkv")
        posix = parse_path("tv", "tv/Show (2020)/Season 02/Show - S02E03.mkv")

        assert windows == posix

    def test_bare_filename(self):
        result = parse_path("movie", "The.Matrix.1999.1080p.BluRay.x264-GROUP.mkv")

        assert result.directory is None
        assert result.season is None
        assert result.file.title == "The Matrix"
        assert result.file.group == "GROUP"

    def test_only_season_directory_above_file(self):
        result = parse_path("tv", "Season 03/Show - S03E01.mkv")

        assert result.season == 3
        assert result.directory is None

    def test_drive_root_is_not_a_directory(self):
        result = parse_path("movie", "D:\\Movie (2001).mkv")

        assert result.directory is None
        assert result.file.title == "Movie"
        assert result.file.year == 2001

    def test_empty_path(self):
        result = ReleaseParser("tv").parse_path("")

        assert result.full_path == ""
        assert result.directory is None
        assert result.season is None
        assert result.file.title == ""
        assert result.file.type == "tv"

    def test_to_dict(self):
        data = parse_path("tv", "/tv/Show (2010)/Season 01/Show - S01E01 - Pilot.mkv").to_dict()

        assert data["season"] == 1
        assert data["file"]["title_extra"] == "Pilot"
        assert data["directory"]["year"] == 2010
