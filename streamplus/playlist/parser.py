"""M3U playlist parser producing the channel list served as JSON"""

import logging
import re
from dataclasses import asdict, dataclass

from ..exceptions import InvalidSourceError

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Sem nome"
DEFAULT_GROUP = "Desconhecido"

M3U_MARKER = "#EXTM3U"
EXTINF_PREFIX = "#EXTINF:"

# Standalone video files, not TV streams
MEDIA_FILE_EXTENSIONS = ("mp4", "mkv", "avi", "mov", "flv", "webm")


@dataclass(frozen=True)
class Channel:
    """A playable channel taken from the playlist"""

    name: str
    group: str
    logo: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class ChannelMetadata:
    """Metadata carried from an #EXTINF line to the URL line(s) after it"""

    name: str = DEFAULT_NAME
    group: str = DEFAULT_GROUP
    logo: str = ""


class M3UParser:
    """Line-oriented M3U parser"""

    LINE_SPLIT_PATTERN = re.compile(r"\r?\n")
    TVG_NAME_PATTERN = re.compile(r'tvg-name="([^"]*)"', re.IGNORECASE)
    GROUP_TITLE_PATTERN = re.compile(r'group-title="([^"]*)"', re.IGNORECASE)
    TVG_LOGO_PATTERN = re.compile(r'tvg-logo="([^"]*)"', re.IGNORECASE)
    MEDIA_FILE_PATTERN = re.compile(
        r"\.(?:%s)$" % "|".join(MEDIA_FILE_EXTENSIONS), re.IGNORECASE
    )

    @staticmethod
    def _attribute(pattern: re.Pattern, line: str) -> str:
        match = pattern.search(line)
        return match.group(1) if match else ""

    @staticmethod
    def parse_extinf_line(line: str) -> ChannelMetadata:
        """
        Extract channel metadata from an #EXTINF line

        Format: #EXTINF:-1 tvg-name="..." tvg-logo="..." group-title="...",Channel Name

        Empty attribute values count as missing. The name falls back to the
        text after the first comma, then to "Sem nome".
        """
        name = M3UParser._attribute(M3UParser.TVG_NAME_PATTERN, line)
        if not name and "," in line:
            name = line.split(",", 1)[1].strip()

        return ChannelMetadata(
            name=name or DEFAULT_NAME,
            group=M3UParser._attribute(M3UParser.GROUP_TITLE_PATTERN, line) or DEFAULT_GROUP,
            logo=M3UParser._attribute(M3UParser.TVG_LOGO_PATTERN, line),
        )

    @staticmethod
    def is_media_file(url: str) -> bool:
        """True for URLs pointing at a direct video file"""
        return bool(M3UParser.MEDIA_FILE_PATTERN.search(url))

    @staticmethod
    def parse(text: str) -> list[Channel]:
        """
        Parse playlist text into channels, in playlist order

        Metadata from the latest #EXTINF line applies to every http line that
        follows it until the next #EXTINF. Only the first channel for each URL
        is kept.

        Raises:
            InvalidSourceError: the text has no #EXTM3U marker
        """
        if M3U_MARKER not in text:
            raise InvalidSourceError("Lista M3U inválida", details="missing #EXTM3U header")

        channels: list[Channel] = []
        current = ChannelMetadata()
        skipped_media = 0

        for line in M3UParser.LINE_SPLIT_PATTERN.split(text):
            if line.startswith(EXTINF_PREFIX):
                current = M3UParser.parse_extinf_line(line)
            elif line.startswith("http"):
                url = line.strip()
                if M3UParser.is_media_file(url):
                    skipped_media += 1
                    continue
                channels.append(
                    Channel(name=current.name, group=current.group, logo=current.logo, url=url)
                )

        unique = dedupe_by_url(channels)
        logger.info(
            f"Parsed {len(unique)} channels "
            f"({len(channels) - len(unique)} duplicates, {skipped_media} media files skipped)"
        )
        return unique


def dedupe_by_url(channels: list[Channel]) -> list[Channel]:
    """Keep the first channel for each non-empty URL, preserving order"""
    seen: set[str] = set()
    unique = []
    for channel in channels:
        if not channel.url or channel.url in seen:
            continue
        seen.add(channel.url)
        unique.append(channel)
    return unique


def filter_by_name(channels: list[Channel], query: str | None) -> list[Channel]:
    """Case-insensitive substring match on the channel name; no query means no filter"""
    if not query:
        return channels
    needle = query.lower()
    return [channel for channel in channels if needle in channel.name.lower()]
