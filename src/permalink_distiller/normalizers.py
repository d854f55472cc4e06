"""String normalizers shared by the compilers and the classifier.

Every function here is idempotent: applying it to its own output returns
the output unchanged.
"""

import re
from unicodedata import normalize
from urllib.parse import unquote


def slugify(value) -> str:
    """Turn a metadata value into a URL-safe path segment.

    Args:
        value: Any value; non-strings are converted with str()

    Returns:
        Lowercase ASCII string with non-alphanumeric runs collapsed to "-"

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café au lait")
        'cafe-au-lait'
        >>> slugify(2014)
        '2014'
    """
    if value is None:
        return ""
    text = normalize("NFKD", str(value)).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def normalize_path(path: str) -> str:
    """Normalize an output path the way the sitemap stores it.

    Drops a leading slash and decodes percent escapes.

    Examples:
        >>> normalize_path("/2014/03/hello-world/")
        '2014/03/hello-world/'
        >>> normalize_path("caf%C3%A9.html")
        'café.html'
    """
    return unquote(re.sub(r"^/", "", path))


def normalize_lang(lang: str | None) -> str | None:
    """Default language normalization policy.

    Lowercases the language, uppercases the region, and drops a region that
    just repeats the language.

    Examples:
        >>> normalize_lang("EN")
        'en'
        >>> normalize_lang("pt_br")
        'pt-BR'
        >>> normalize_lang("de-DE")
        'de'
    """
    if lang is None:
        return None
    language, _, region = str(lang).replace("_", "-").partition("-")
    language = language.lower()
    if not region or region.lower() == language:
        return language
    return f"{language}-{region.upper()}"
