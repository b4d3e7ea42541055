"""
Tag extraction passes for release names

Each pass claims one category of token from a ``TagScan`` and blanks the
matched span so that later, looser passes and the title extractor never see
it again. Blanking keeps offsets aligned with the normalized input.
"""
import logging
import re
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)

ANCHOR_CATEGORIES = ('id', 'edition', 'year', 'episode', 'disc', 'resolution')

OPENING_BRACKET_RE = re.compile(r'[\[\(\{]')


def token_pattern(pattern: str) -> Pattern:
    """Compile an alternation that must stand alone between non-alphanumerics"""
    return re.compile(r'(?<![A-Za-z0-9])(?:' + pattern + r')(?![A-Za-z0-9])', re.IGNORECASE)


def _compile_table(table: Iterable[Tuple[str, str]]) -> List[Tuple[Pattern, str]]:
    return [(token_pattern(pattern), value) for pattern, value in table]


def _scene_cased(token: str) -> bool:
    """GERMAN, SWEDiSH and MAX read as tags, German, Web and Max as words"""
    return not (token.islower() or token.istitle())


class TagScan:
    """Working buffer shared by the extraction passes of a single parse"""

    def __init__(self, text: str):
        self.text = text
        self.working = text
        self.spans: List[Tuple[int, int, str]] = []
        self.region_start = 0
        # Episode subtitle, never searched by the loose passes
        self.skip = (0, 0)

    def consume(self, start: int, end: int, category: str):
        self.working = self.working[:start] + ' ' * (end - start) + self.working[end:]
        self.spans.append((start, end, category))

    def _in_region(self, match) -> bool:
        return not self.skip[0] <= match.start() < self.skip[1]

    def search(self, regex: Pattern, whole: bool = True):
        if whole:
            return regex.search(self.working)
        for match in regex.finditer(self.working, self.region_start):
            if self._in_region(match):
                return match
        return None

    def finditer(self, regex: Pattern, whole: bool = True):
        if whole:
            return list(regex.finditer(self.working))
        return [m for m in regex.finditer(self.working, self.region_start) if self._in_region(m)]

    def anchor_starts(self) -> List[int]:
        return [start for start, _, category in self.spans if category in ANCHOR_CATEGORIES]

    def first_start(self, after: int = 0, exclude: Tuple[str, ...] = ()) -> int:
        starts = [start for start, _, category in self.spans
                  if start >= after and category not in exclude]
        return min(starts) if starts else len(self.text)

    def span(self, category: str) -> Optional[Tuple[int, int]]:
        for start, end, kind in self.spans:
            if kind == category:
                return start, end
        return None


def _episode_numbers(first: int, more: str) -> Tuple[Optional[int], Tuple[int, ...]]:
    """Turn a first episode plus its ``-E02E03`` tail into (episode, episodes)"""
    numbers = [first] + [int(n) for n in re.findall(r'\d+', more)]
    if len(numbers) == 1:
        return first, ()

    last = numbers[-1]
    if '-' in more and first < last <= first + 100:
        return None, tuple(range(first, last + 1))

    unique: List[int] = []
    for number in numbers:
        if number not in unique:
            unique.append(number)
    if len(unique) == 1:
        return unique[0], ()
    return None, tuple(unique)


class TagExtractor:
    """Ordered tag passes with their lookup tables"""

    ID_PATTERNS = {
        'tmdb_id': re.compile(r'[\{\[]tmdb(?:id)?[-=](\d+)[\}\]]', re.IGNORECASE),
        'tvdb_id': re.compile(r'[\{\[]tvdb(?:id)?[-=](\d+)[\}\]]', re.IGNORECASE),
        'imdb_id': re.compile(r'[\{\[]imdb(?:id)?[-=](tt\d+)[\}\]]', re.IGNORECASE),
    }

    EDITION_PATTERN = re.compile(r'\{edition-([^{}]+)\}', re.IGNORECASE)

    YEAR_BRACKETED_PATTERN = re.compile(r'[\(\[]((?:19|20)\d{2})[\)\]]')
    YEAR_FREE_PATTERN = re.compile(
        r'(?<![A-Za-z0-9])((?:19|20)\d{2})(?![A-Za-z0-9])(?![-. ]\d{1,2}[-. ]\d{1,2}(?!\d))'
    )
    # Tokens that close the title region, used to pick the right free year
    TITLE_END_PATTERN = token_pattern(
        r'S\d{1,3}E\d{1,4}|S\d{1,3}|\d{1,2}x\d{2,3}|Season[ ._-]?\d{1,3}'
        r'|(?:480|576|720|1080|2160|4320)[pi]|Blu-?Ray|Remux|WEB-?DL|WEB-?Rip|HDTV|DVD-?Rip'
    )

    # Tokens that are never plain words, whatever their casing
    QUALITY_MARKER_PATTERN = token_pattern(
        r'Blu-?Ray|Remux|WEB-?DL|WEB-?Rip|HDTV|PDTV|BDRip|BRRip|DVD-?Rip|HDRip'
        r'|x\.?26[45]|H\.?26[45]|HEVC|AVC|XviD|DivX'
        r'|(?:DDPA?|DD|AAC|E?AC-?3)(?:[ .]?\d\.\d)?|DTS(?:-?HD)?|TrueHD|FLAC'
        r'|HDR10(?:Plus|\+)?|DoVi|1[02]-?bit|v\d{1,3}(?:\.\d{1,3}){0,3}'
        r'|NSW|PS[345]|XBOX(?:360|ONE)?|Win(?:32|64)'
    )

    SEASON_EPISODE_PATTERN = re.compile(
        r'(?<![A-Za-z0-9])S(\d{1,3})[ ._]?E(\d{1,4})((?:-?E\d{1,4}|-\d{1,4}(?![0-9A-Za-z]))*)(?!\d)',
        re.IGNORECASE,
    )
    CROSS_PATTERN = token_pattern(r'(\d{1,2})x(\d{2,3})')
    DATE_PATTERN = re.compile(r'(?<!\d)((?:19|20)\d{2})[-. ](\d{2})[-. ](\d{2})(?!\d)')
    EPISODE_ONLY_PATTERN = token_pattern(r'EP?(\d{1,4})((?:-?E\d{1,4})*)')
    SEASON_WORD_PATTERN = re.compile(
        r'(?<![A-Za-z])Season[ ._-]?(\d{1,3})(?:[ ._-]*Episode[ ._-]?(\d{1,4}))?(?!\d)',
        re.IGNORECASE,
    )
    SEASON_ONLY_PATTERN = token_pattern(r'S(\d{1,3})')
    ABSOLUTE_EPISODE_PATTERN = re.compile(r'(?<=\s-\s)(\d{1,4})(?=v\d|\s|\[|\(|$)')
    LEADING_BRACKET_PATTERN = re.compile(r'^\s*\[([^\[\]]*[A-Za-z0-9][^\[\]]*)\]')

    DISC_PATTERN = token_pattern(r'(?:Disc|Disk|CD)[ ._-]?(\d{1,2})')

    RESOLUTION_PATTERN = token_pattern(r'(480|576|720|1080|2160|4320)([pi])')

    SOURCES = (
        (r'MA[ .]WEB-?DL', 'MA WEBDL'),
        (r'Remux', 'Remux'),
        (r'Blu-?Ray', 'BluRay'),
        (r'BDRip', 'BDRip'),
        (r'BRRip', 'BRRip'),
        (r'WEB[-.]DL', 'WEB-DL'),
        (r'WEBDL', 'WEBDL'),
        (r'WEB-?Rip', 'WEBRip'),
        (r'WEB', 'WEB'),
        (r'HDTV', 'HDTV'),
        (r'PDTV', 'PDTV'),
        (r'SDTV', 'SDTV'),
        (r'DVD-?Rip', 'DVDRip'),
        (r'DVD-?R', 'DVDR'),
        (r'DVD[59]?', 'DVD'),
        (r'HDRip', 'HDRip'),
        (r'HD-?CAM', 'HDCAM'),
        (r'CAM-?Rip|CAM', 'CAM'),
        (r'TELESYNC|HD-?TS', 'TS'),
        (r'TELECINE|HD-?TC', 'TC'),
        (r'DVDSCR|SCREENER', 'SCR'),
    )

    PROVIDERS = (
        (r'AMZN', 'AMZN'),
        (r'NF', 'NF'),
        (r'DSNP', 'DSNP'),
        (r'DSNY', 'DSNY'),
        (r'HMAX', 'HMAX'),
        (r'MAX', 'MAX'),
        (r'ATVP', 'ATVP'),
        (r'HULU', 'HULU'),
        (r'PCOK', 'PCOK'),
        (r'PMTP', 'PMTP'),
        (r'CR', 'CR'),
        (r'FUNI', 'FUNI'),
        (r'HIDIVE', 'HIDIVE'),
        (r'STAN', 'STAN'),
        (r'CRAV', 'CRAV'),
        (r'SHO', 'SHO'),
        (r'HBO', 'HBO'),
        (r'BCORE', 'BCORE'),
        (r'MUBI', 'MUBI'),
        (r'ROKU', 'ROKU'),
        (r'VUDU', 'VUDU'),
        (r'TUBI', 'TUBI'),
        (r'DSCP', 'DSCP'),
        (r'ALL4', 'ALL4'),
        (r'SKST', 'SKST'),
        (r'VIAP', 'VIAP'),
    )

    AUDIO_CODECS = (
        (r'DTS[- .]?HD[- .]?MA', 'DTS-HD MA'),
        (r'DTS[- .]?HD[- .]?HRA', 'DTS-HD HRA'),
        (r'DTS[- .]?X', 'DTS-X'),
        (r'DTS[- .]?HD', 'DTS-HD'),
        (r'DTS[- .]?ES', 'DTS-ES'),
        (r'DTS', 'DTS'),
        (r'TrueHD[ .]?Atmos', 'TrueHD Atmos'),
        (r'TrueHD', 'TrueHD'),
        (r'E-?AC-?3[ .]?Atmos', 'EAC3 Atmos'),
        (r'DDPA|DDP', 'DDP'),
        (r'DD\+', 'DD+'),
        (r'E-?AC-?3', 'EAC3'),
        (r'AC-?3', 'AC3'),
        (r'DD', 'DD'),
        (r'AAC(?:-?LC)?', 'AAC'),
        (r'L?PCM', 'PCM'),
        (r'FLAC', 'FLAC'),
        (r'OPUS', 'Opus'),
        (r'MP3', 'MP3'),
        (r'Atmos', 'Atmos'),
    )
    AUDIO_SUFFIX = r'(?:[ .]?(\d\.\d))?([ .]Atmos)?'

    DOLBY_VISION = r'(?:DV|DoVi|Dolby[ .]?Vision)'
    HDR_JOIN = r'[ ._\-\[\]]*'
    HDR_TOKENS = (
        (DOLBY_VISION + HDR_JOIN + r'HDR10(?:Plus|\+|P)', 'DV HDR10Plus'),
        (r'HDR10(?:Plus|\+|P)' + HDR_JOIN + DOLBY_VISION, 'DV HDR10Plus'),
        (DOLBY_VISION + HDR_JOIN + r'HDR10', 'DV HDR10'),
        (r'HDR10' + HDR_JOIN + DOLBY_VISION, 'DV HDR10'),
        (DOLBY_VISION + HDR_JOIN + r'HDR', 'DV HDR'),
        (r'HDR10(?:Plus|\+|P)', 'HDR10Plus'),
        (r'HDR10', 'HDR10'),
        (DOLBY_VISION, 'DV'),
        (r'HDR', 'HDR'),
        (r'HLG', 'HLG'),
    )

    # None keeps the matched spelling as-is
    FORMATS = (
        (r'x\.?264', 'x264'),
        (r'x\.?265', 'x265'),
        (r'H\.?26[45]', None),
        (r'AVC', 'AVC'),
        (r'HEVC', 'HEVC'),
        (r'AV1', 'AV1'),
        (r'VP9', 'VP9'),
        (r'XviD', 'XviD'),
        (r'DivX', 'DivX'),
        (r'VC-?1', 'VC-1'),
        (r'MPEG-?2', 'MPEG-2'),
    )

    LANGUAGES = (
        (r'English|ENG', 'en'),
        (r'German|GER|Deutsch', 'de'),
        (r'TrueFrench|French|VFF|VFQ', 'fr'),
        (r'Spanish|Castellano|Latino|ESP', 'es'),
        (r'Italian|ITA', 'it'),
        (r'Portuguese', 'pt'),
        (r'Russian|RUS', 'ru'),
        (r'Japanese|JAP|JPN', 'ja'),
        (r'Chinese|Mandarin|Cantonese|CHS|CHT', 'zh'),
        (r'Korean|KOR', 'ko'),
        (r'Swedish|SWE', 'sv'),
        (r'Norwegian', 'no'),
        (r'Danish', 'da'),
        (r'Finnish', 'fi'),
        (r'Dutch|Flemish', 'nl'),
        (r'Polish|PLDUB', 'pl'),
        (r'Hindi', 'hi'),
        (r'Tamil', 'ta'),
        (r'Telugu', 'te'),
        (r'Turkish', 'tr'),
        (r'Hungarian', 'hu'),
        (r'Czech', 'cs'),
        (r'Arabic', 'ar'),
        (r'Greek', 'el'),
        (r'Hebrew', 'he'),
        (r'Thai', 'th'),
        (r'Vietnamese', 'vi'),
        (r'Icelandic', 'is'),
        (r'Ukrainian', 'uk'),
        (r'Romanian', 'ro'),
        (r'Bulgarian', 'bg'),
        (r'Croatian', 'hr'),
        (r'Serbian', 'sr'),
        (r'Indonesian', 'id'),
    )

    FLAGS = (
        (r'PROPER', 'PROPER'),
        (r'REPACK', 'REPACK'),
        (r'RERIP', 'RERIP'),
        (r'READNFO|READ[ .]NFO', 'READNFO'),
        (r'NFOFIX', 'NFOFIX'),
        (r'DIRFIX', 'DIRFIX'),
        (r'SYNCFIX', 'SYNCFIX'),
        (r'INTERNAL', 'INTERNAL'),
        (r'LIMITED', 'LIMITED'),
        (r'UNRATED', 'UNRATED'),
        (r'UNCUT', 'UNCUT'),
        (r'EXTENDED', 'EXTENDED'),
        (r'REMASTERED', 'REMASTERED'),
        (r'IMAX', 'IMAX'),
        (r'3D', '3D'),
        (r'10-?bit', '10bit'),
        (r'12-?bit', '12bit'),
        (r'ANiME', 'ANiME'),
        (r'MULTi', 'MULTi'),
        (r'DUAL(?:[ .-]?AUDIO)?', 'DUAL'),
        (r'DUBBED', 'DUBBED'),
        (r'SUBBED', 'SUBBED'),
        (r'HARDSUBS?|HC', 'HC'),
        (r'COMPLETE', 'COMPLETE'),
        (r'FESTIVAL', 'FESTIVAL'),
        (r'DOCU', 'DOCU'),
        (r'HYBRID', 'HYBRID'),
        (r'WS', 'WS'),
    )

    VERSION_PATTERN = token_pattern(r'v\d{1,3}(?:\.\d{1,3}){0,3}')

    DEVICES = (
        (r'PS[345]', None),
        (r'PSP|PSV', None),
        (r'XBOX(?:360|ONE)?|X360', None),
        (r'NSW', 'NSW'),
        (r'WiiU|Wii', None),
        (r'NDS|3DS', None),
    )

    OPERATING_SYSTEMS = (
        (r'Windows|Win32|Win64', 'Windows'),
        (r'MacOSX?|OSX', 'macOS'),
        (r'Linux', 'Linux'),
        (r'iOS', 'iOS'),
        (r'Android', 'Android'),
    )

    CHECKSUM_PATTERN = re.compile(r'\[[0-9A-Fa-f]{8}\]')
    # A trailing [site] or [checksum] after -GROUP is not the group
    GROUP_HYPHEN_PATTERN = re.compile(r'-([A-Za-z0-9][A-Za-z0-9_.@&]*?)\s*[\])]?(?:\s*\[[^\[\]]*\])?\s*$')
    GROUP_BRACKET_PATTERN = re.compile(r'\[([^\[\]]*[A-Za-z0-9][^\[\]]*)\]\s*$')
    LEFTOVER_BRACKET_PATTERN = re.compile(r'\[([^\[\]]*[A-Za-z0-9][^\[\]]*)\]')

    def __init__(self, tokens: Optional[Mapping[str, Mapping[str, str]]] = None):
        tokens = tokens or {}
        providers = [(re.escape(k), v) for k, v in tokens.get('providers', {}).items()]
        languages = [(re.escape(k), v) for k, v in tokens.get('languages', {}).items()]
        flags = [(re.escape(k), v) for k, v in tokens.get('flags', {}).items()]

        self.sources = _compile_table(self.SOURCES)
        self.providers = _compile_table(providers + list(self.PROVIDERS))
        self.audio_codecs = [(re.compile(r'(?<![A-Za-z0-9])(?:' + pattern + r')' + self.AUDIO_SUFFIX
                                         + r'(?![A-Za-z0-9])', re.IGNORECASE), value)
                             for pattern, value in self.AUDIO_CODECS]
        self.hdr_tokens = _compile_table(self.HDR_TOKENS)
        self.formats = _compile_table(self.FORMATS)
        self.languages = _compile_table(languages + list(self.LANGUAGES))
        self.flags = _compile_table(flags + list(self.FLAGS))
        self.devices = _compile_table(self.DEVICES)
        self.operating_systems = _compile_table(self.OPERATING_SYSTEMS)

    # Anchors: searched over the whole string

    def extract_ids(self, scan: TagScan) -> Dict[str, Optional[str]]:
        ids = {}
        for name, pattern in self.ID_PATTERNS.items():
            match = scan.search(pattern)
            ids[name] = match.group(1) if match else None
            if match:
                scan.consume(match.start(), match.end(), 'id')
                logger.debug(f"Matched {name}: {match.group(1)}")
        return ids

    def extract_edition(self, scan: TagScan) -> Optional[str]:
        match = scan.search(self.EDITION_PATTERN)
        if not match:
            return None
        scan.consume(match.start(), match.end(), 'edition')
        return match.group(1).strip()

    def extract_year(self, scan: TagScan) -> Optional[int]:
        """Parenthesized/bracketed year first, otherwise the free token closest to the tags"""
        match = scan.search(self.YEAR_BRACKETED_PATTERN)
        if match:
            scan.consume(match.start(), match.end(), 'year')
            return int(match.group(1))

        candidates = [m for m in scan.finditer(self.YEAR_FREE_PATTERN) if m.start() > 0]
        if not candidates:
            return None

        boundary = scan.search(self.TITLE_END_PATTERN)
        if boundary:
            candidates = [m for m in candidates if m.start() < boundary.start()]
        if not candidates:
            return None
        match = candidates[-1]
        scan.consume(match.start(), match.end(), 'year')
        return int(match.group(1))

    def extract_episode(self, scan: TagScan) -> Dict[str, object]:
        """Season/episode numbering, first matching family wins"""
        numbering = {'season': None, 'episode': None, 'episodes': (), 'date': None}

        match = scan.search(self.SEASON_EPISODE_PATTERN)
        if match:
            numbering['season'] = int(match.group(1))
            numbering['episode'], numbering['episodes'] = _episode_numbers(int(match.group(2)), match.group(3))
            scan.consume(match.start(), match.end(), 'episode')
            return numbering

        match = scan.search(self.CROSS_PATTERN)
        if match:
            numbering['season'] = int(match.group(1))
            numbering['episode'] = int(match.group(2))
            scan.consume(match.start(), match.end(), 'episode')
            return numbering

        for match in scan.finditer(self.DATE_PATTERN):
            year, month, day = match.groups()
            if 1 <= int(month) <= 12 and 1 <= int(day) <= 31:
                numbering['date'] = f"{year}-{month}-{day}"
                scan.consume(match.start(), match.end(), 'episode')
                return numbering

        match = scan.search(self.EPISODE_ONLY_PATTERN)
        if match:
            numbering['episode'], numbering['episodes'] = _episode_numbers(int(match.group(1)), match.group(2))
            scan.consume(match.start(), match.end(), 'episode')
            return numbering

        match = scan.search(self.SEASON_WORD_PATTERN)
        if match:
            numbering['season'] = int(match.group(1))
            if match.group(2):
                numbering['episode'] = int(match.group(2))
            scan.consume(match.start(), match.end(), 'episode')
            return numbering

        match = scan.search(self.SEASON_ONLY_PATTERN)
        if match:
            numbering['season'] = int(match.group(1))
            scan.consume(match.start(), match.end(), 'episode')
            return numbering

        if self.LEADING_BRACKET_PATTERN.match(scan.working):
            match = scan.search(self.ABSOLUTE_EPISODE_PATTERN)
            if match:
                numbering['episode'] = int(match.group(1))
                scan.consume(match.start(), match.end(), 'episode')

        return numbering

    def extract_disc(self, scan: TagScan) -> Optional[int]:
        match = scan.search(self.DISC_PATTERN)
        if not match:
            return None
        scan.consume(match.start(), match.end(), 'disc')
        return int(match.group(1))

    def extract_resolution(self, scan: TagScan) -> str:
        match = scan.search(self.RESOLUTION_PATTERN)
        if not match:
            return ""
        scan.consume(match.start(), match.end(), 'resolution')
        return f"{match.group(1)}{match.group(2).lower()}"

    # Loose families: searched from the first anchor onward

    def settle_region(self, scan: TagScan):
        """Set where the loose passes may look

        The region starts at the first anchor. Without one it starts at the
        first token that cannot be a title word, and is empty when there is
        none. The episode subtitle (up to the next anchor, bracket or
        unmistakable tag) is skipped.
        """
        starts = scan.anchor_starts()
        if not starts:
            scan.region_start = self._first_marker(scan, 0)
            return
        scan.region_start = min(starts)

        marker = scan.span('episode')
        if marker:
            end = min(scan.first_start(after=marker[1]), self._first_marker(scan, marker[1]))
            bracket = OPENING_BRACKET_RE.search(scan.text, marker[1], end)
            if bracket:
                end = bracket.start()
            scan.skip = (marker[1], end)

    def _first_marker(self, scan: TagScan, start: int) -> int:
        positions = [m.start() for m in self.QUALITY_MARKER_PATTERN.finditer(scan.working, start)]
        for pattern, _ in self.sources + self.providers + self.languages + self.flags:
            positions.extend(m.start() for m in pattern.finditer(scan.working, start)
                             if _scene_cased(m.group(0)))
        return min(positions, default=len(scan.text))

    def _claim_all(self, scan: TagScan, table, category: str) -> Tuple[str, Optional[object]]:
        """Consume every token of a table, the highest-priority one is the value"""
        value = ""
        first = None
        for pattern, canonical in table:
            for match in scan.finditer(pattern, whole=False):
                if first is None:
                    first = match
                    value = canonical if canonical is not None else match.group(0)
                scan.consume(match.start(), match.end(), category)
        if first is not None:
            logger.debug(f"Matched {category}: {value}")
        return value, first

    def extract_source(self, scan: TagScan) -> str:
        return self._claim_all(scan, self.sources, 'source')[0]

    def extract_streaming_provider(self, scan: TagScan) -> str:
        return self._claim_all(scan, self.providers, 'provider')[0]

    def extract_audio(self, scan: TagScan) -> str:
        codec, match = self._claim_all(scan, self.audio_codecs, 'audio')
        if match is None:
            return ""
        parts = [codec]
        if match.group(1):
            parts.append(match.group(1))
        if match.group(2) and 'Atmos' not in codec:
            parts.append('Atmos')
        return ' '.join(parts)

    def extract_hdr(self, scan: TagScan) -> str:
        return self._claim_all(scan, self.hdr_tokens, 'hdr')[0]

    def extract_format(self, scan: TagScan) -> str:
        return self._claim_all(scan, self.formats, 'format')[0]

    def extract_language(self, scan: TagScan) -> Dict[str, str]:
        found = []
        for pattern, code in self.languages:
            for match in scan.finditer(pattern, whole=False):
                found.append((match.start(), code, match.group(0)))
                scan.consume(match.start(), match.end(), 'language')

        language: Dict[str, str] = {}
        for _, code, token in sorted(found):
            language.setdefault(code, token)
        return language

    def extract_flags(self, scan: TagScan) -> List[Tuple[int, str]]:
        """Flags with their positions, so callers can keep input order"""
        found = []
        for pattern, flag in self.flags:
            for match in scan.finditer(pattern, whole=False):
                found.append((match.start(), flag))
                scan.consume(match.start(), match.end(), 'flag')
        return found

    def extract_version(self, scan: TagScan) -> str:
        match = scan.search(self.VERSION_PATTERN, whole=False)
        if not match:
            return ""
        scan.consume(match.start(), match.end(), 'version')
        return match.group(0)

    def extract_device(self, scan: TagScan) -> str:
        return self._claim_all(scan, self.devices, 'device')[0].upper()

    def extract_os(self, scan: TagScan) -> str:
        return self._claim_all(scan, self.operating_systems, 'os')[0]

    def strip_checksum(self, scan: TagScan):
        for match in scan.finditer(self.CHECKSUM_PATTERN, whole=False):
            scan.consume(match.start(), match.end(), 'checksum')

    def extract_group(self, scan: TagScan) -> str:
        """Trailing -GROUP, then a trailing [GROUP], then a leading [GROUP] tag"""
        leading = self.LEADING_BRACKET_PATTERN.match(scan.working)
        if leading:
            scan.consume(leading.start(), leading.end(), 'prefix')

        match = self.GROUP_HYPHEN_PATTERN.search(scan.working)
        if match and match.start() >= scan.first_start(exclude=('prefix',)):
            scan.consume(match.start(), match.end(), 'group')
            return match.group(1)

        match = self.GROUP_BRACKET_PATTERN.search(scan.working)
        if match and match.start() > 0:
            scan.consume(match.start(), match.end(), 'group')
            return match.group(1).strip()

        if leading:
            return leading.group(1).strip()
        return ""

    def extract_leftover_brackets(self, scan: TagScan, after: int) -> List[Tuple[int, str]]:
        """Unclaimed [TOKEN] brackets past the title region"""
        found = []
        for match in self.LEFTOVER_BRACKET_PATTERN.finditer(scan.working, after):
            found.append((match.start(), match.group(1).strip()))
            scan.consume(match.start(), match.end(), 'flag')
        return found
