"""Assorted helpers for files, URLs, text, hashing and colours."""

from __future__ import annotations

import base64
import binascii
import hashlib
import os
import re
import shutil
import sys
import time
import uuid
from html.parser import HTMLParser
from pathlib import Path, PurePath
from urllib.parse import quote, unquote, urlsplit
from urllib.request import pathname2url, url2pathname

from fluentkit.theme import Color


def new_uuid() -> str:
    """Return a random UUID in braces."""
    return "{" + str(uuid.uuid4()) + "}"


def read_file(file_name: str | os.PathLike[str]) -> str:
    """Return the text of a file, or an empty string if it cannot be read."""
    try:
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return ""


def is_macos() -> bool:
    """Whether running on macOS."""
    return sys.platform == "darwin"


def is_linux() -> bool:
    """Whether running on Linux."""
    return sys.platform.startswith("linux")


def is_win() -> bool:
    """Whether running on Windows."""
    return sys.platform.startswith("win")


def to_local_path(url: str) -> str:
    """Return the local path of a file URL, or an empty string for other URLs."""
    parts = urlsplit(url)
    if parts.scheme.lower() != "file":
        return ""
    path = url2pathname(parts.path)
    if parts.netloc and parts.netloc.lower() != "localhost":
        return "//" + unquote(parts.netloc) + path
    return path


def file_name_from_url(url: str) -> str:
    """Return the file name part of a file URL."""
    local = to_local_path(url)
    return PurePath(local).name if local else ""


def url_from_file_path(path: str | os.PathLike[str]) -> str:
    """Return a file URL for a local path."""
    text = os.fspath(path)
    if not text:
        return ""
    pure = PurePath(text)
    if pure.is_absolute():
        return pure.as_uri()
    return "file:" + pathname2url(text)


_BLOCK_TAGS = frozenset({
    "p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "li", "ul", "ol",
    "tr", "table", "blockquote", "pre", "center", "dl", "dt", "dd", "hr",
})
_SKIPPED_TAGS = frozenset({"script", "style", "head", "title"})
_COLLAPSIBLE = re.compile(r"[ \t\n\r\f]+")


class _PlainTextParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []
        self._skip_depth = 0
        self._pre_depth = 0
        self._pending_break = False

    def _at_line_start(self) -> bool:
        return not self.parts or self.parts[-1].endswith("\n") or self._pending_break

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth += 1
        elif tag == "br":
            self.parts.append("\n")
        elif tag in _BLOCK_TAGS:
            self._pending_break = True
            if tag == "pre":
                self._pre_depth += 1

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        elif tag in _BLOCK_TAGS:
            self._pending_break = True
            if tag == "pre":
                self._pre_depth = max(0, self._pre_depth - 1)

    def handle_data(self, data: str) -> None:
        if self._skip_depth:
            return
        if not self._pre_depth:
            data = _COLLAPSIBLE.sub(" ", data)
            if self._at_line_start():
                data = data.lstrip(" ")
        if not data:
            return
        if self._pending_break and self.parts and not self.parts[-1].endswith("\n"):
            self.parts.append("\n")
        self._pending_break = False
        self.parts.append(data)


def html_to_plain_text(html: str) -> str:
    """Strip markup from HTML, keeping one line per block."""
    parser = _PlainTextParser()
    parser.feed(html)
    parser.close()
    text = "".join(parser.parts).replace("\xa0", " ")
    return "\n".join(line.rstrip(" ") for line in text.split("\n"))


def color_alpha(color: Color, alpha: float) -> Color:
    """Return the colour with its alpha set from a fraction in 0..1."""
    return Color(color.red, color.green, color.blue, int(255 * alpha))


def md5(text: str) -> str:
    """Hex MD5 digest of the UTF-8 text."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def sha256(text: str) -> str:
    """Hex SHA-256 digest of the UTF-8 text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def to_base64(text: str) -> str:
    """Base64 encoding of the UTF-8 text."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def from_base64(text: str) -> str:
    """Decode base64 leniently, ignoring stray characters and missing padding."""
    cleaned = re.sub(r"[^A-Za-z0-9+/]", "", text)
    usable = len(cleaned) - len(cleaned) % 4
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:usable]
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        raw = base64.b64decode(cleaned)
    except binascii.Error:
        raw = b""
    return raw.decode("utf-8", errors="replace")


def remove_dir(dir_path: str | os.PathLike[str]) -> bool:
    """Delete a directory tree; True if it is gone afterwards."""
    if not os.fspath(dir_path):
        return False
    path = Path(dir_path)
    if not path.exists():
        return True
    if not path.is_dir():
        return False
    shutil.rmtree(path, ignore_errors=True)
    return not path.exists()


def remove_file(file_path: str | os.PathLike[str]) -> bool:
    """Delete a file; False if it did not exist or could not be removed."""
    try:
        os.remove(file_path)
    except OSError:
        return False
    return True


def current_timestamp() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def application_dir_path() -> str:
    """Directory holding the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not program:
        return os.getcwd()
    return str(Path(program).resolve().parent)