"""
Slug and display-name normalization.

Slugs are the natural key of every catalog document (e.g. tech_skill:nodejs),
so the same display name must always produce the same slug.
"""

import re
import unicodedata

# Applied before the generic cleanup so "c++" and "c#" don't both collapse to "c".
_SYMBOL_REPLACEMENTS = [
    ("++", "pp"),
    ("#", "sharp"),
    ("+", "plus"),
]

# Words that stay upper-case when formatting a raw tag for display.
_ACRONYMS = {
    "ai", "api", "aws", "ci", "cd", "cli", "cms", "css", "csv", "dns", "gcp",
    "gpu", "gui", "html", "http", "https", "ide", "iot", "jwt", "json", "ldap",
    "llm", "ml", "mvc", "mvvm", "nlp", "orm", "pdf", "php", "rest", "rpc",
    "sdk", "seo", "sql", "ssh", "ssl", "tcp", "tls", "ui", "ux", "uri", "url",
    "vm", "vpn", "xml", "yaml",
}


def fold_accents(text: str) -> str:
    """Lowercase and strip diacritics ("Programação" -> "programacao")."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).lower()


def normalize_slug(name: str) -> str:
    """
    Normalize a display name or raw tag to a URL-safe slug.

    Lowercase, accent-folded; "++"/"#"/"+" spelled out; a leading dot becomes
    "dot" (.net -> dotnet); other dots dropped (node.js -> nodejs); any other
    run of non-alphanumerics becomes a single hyphen.
    """
    if not name or not isinstance(name, str):
        return "unknown"
    s = fold_accents(name.strip())
    for symbol, word in _SYMBOL_REPLACEMENTS:
        s = s.replace(symbol, word)
    if s.startswith("."):
        s = "dot" + s[1:]
    s = s.replace(".", "")
    s = re.sub(r"[^a-z0-9]+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "unknown"


def format_display_name(tag: str) -> str:
    """
    Turn a raw lowercase tag into a display name: split on hyphens and
    title-case, keeping acronyms upper-case ("rest-api" -> "REST API").
    """
    if not tag:
        return ""
    key = tag.strip().lower()
    words = []
    for word in key.split("-"):
        if not word:
            continue
        if word in _ACRONYMS:
            words.append(word.upper())
        else:
            words.append(word[0].upper() + word[1:])
    return " ".join(words)


def unique(values) -> list[str]:
    """Drop empties and duplicates, keeping first-seen order."""
    seen: set[str] = set()
    out: list[str] = []
    for value in values or []:
        if not isinstance(value, str) or not value or value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out
