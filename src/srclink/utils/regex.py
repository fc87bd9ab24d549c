"""Regular expression helpers."""

import re

_SPECIAL_CHARS_RE = re.compile(r"[-\[\]{}()*+!<=:?./\\^$|#\s,]")


def escape_regexp(text: str) -> str:
    """Backslash-escape regex metacharacters so ``text`` matches literally.

    Examples:
        "a.b*c" -> "a\\.b\\*c"
        "main()" -> "main\\(\\)"
    """
    return _SPECIAL_CHARS_RE.sub(lambda m: "\\" + m.group(0), text)
