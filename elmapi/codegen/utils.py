import re
import unicodedata
from urllib.parse import urlparse

__all__ = (
    'camel_case',
    'capitalize',
    'dedupe',
    'is_url',
    'quote',
)

ELM_KEYWORDS = frozenset(
    {
        'as',
        'case',
        'else',
        'exposing',
        'if',
        'import',
        'in',
        'infix',
        'let',
        'module',
        'of',
        'port',
        'then',
        'type',
        'where',
    }
)


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def is_url(text):
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except (ValueError, AttributeError):
        return False


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def quote(text: str) -> str:
    """Render text as an Elm string literal."""
    escaped = text.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def camel_case(parts: list[str]) -> str:
    """Join name parts into a camelCase identifier.

    Each part is split on non-alphanumeric characters first, so
    ``['get', 'user-books']`` becomes ``getUserBooks``.
    """
    words = []
    for part in parts:
        words.extend(w for w in re.split(r'[^A-Za-z0-9]+', remove_accents(part)) if w)

    if not words:
        return ''
    return words[0][0].lower() + words[0][1:] + ''.join(capitalize(w) for w in words[1:])


def dedupe(items):
    """Remove duplicates, keeping the first occurrence of each item."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
