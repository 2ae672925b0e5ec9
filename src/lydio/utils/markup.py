# src/lydio/utils/markup.py
import re

# Tag names whose opening/closing markup is removed from Text content.
# This is a convenience filter, not an HTML sanitizer.
DANGEROUS_TAGS = (
    "script", "iframe", "object", "embed", "link", "meta",
    "style", "form", "input", "textarea", "button",
)

_DANGEROUS_TAG_RE = re.compile(
    r"</?\s*(?:" + "|".join(DANGEROUS_TAGS) + r")\b[^>]*>",
    re.IGNORECASE,
)

_ESCAPE_TABLE = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
})


def escape_html(value: str) -> str:
    """Escapes &, <, > and double quotes. Single quotes are left untouched."""
    return str(value).translate(_ESCAPE_TABLE)


def strip_dangerous_tags(value: str) -> str:
    """
    Removes opening and closing tags of the denylisted elements.
    The text between the tags is kept, e.g. '<script>x</script>hi' -> 'xhi'.
    """
    return _DANGEROUS_TAG_RE.sub("", str(value))
