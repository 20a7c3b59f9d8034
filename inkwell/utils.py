import math
import re
import unicodedata
import urllib.parse
from datetime import datetime

_SLUG_STRIP = re.compile(r"[^\w\s-]")
_SLUG_DASHES = re.compile(r"[-\s_]+")
_MULTI_SLASH = re.compile(r"/{2,}")
_PERMALINK_TOKEN = re.compile(r":(year|month|day|slug)\b")


def calculate_reading_time(text: str, wpm: int = 200) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / wpm) or 1
    return f"{minutes} min"


def slugify(value: str) -> str:
    """Lowercase ASCII slug: "Affordance for Errors, part 1" -> "affordance-for-errors-part-1"."""
    value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    value = _SLUG_STRIP.sub("", value).strip().lower()
    return _SLUG_DASHES.sub("-", value).strip("-")


def normalize_path(path: str) -> str:
    """
    Normalize a site path for comparison.

    Absolute URLs are reduced to their path; the result always has a leading
    slash, no repeated slashes and no trailing slash (except the root).
    """
    path = (path or "").strip()
    if "://" in path:
        path = urllib.parse.urlsplit(path).path
    path = path.split("?", 1)[0].split("#", 1)[0]
    path = _MULTI_SLASH.sub("/", "/" + path)
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def expand_permalink(pattern: str, date: datetime, slug: str) -> str:
    values = {
        "year": f"{date.year:04d}",
        "month": f"{date.month:02d}",
        "day": f"{date.day:02d}",
        "slug": slug,
    }
    address = _PERMALINK_TOKEN.sub(lambda m: values[m.group(1)], pattern)
    trailing = address.endswith("/")
    address = normalize_path(address)
    if trailing and address != "/":
        address += "/"
    return address
