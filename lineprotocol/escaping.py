"""Escaping of reserved line protocol characters"""

# Space, comma and equals delimit tags and fields. Translated in one pass,
# so a backslash inserted for one character is never re-escaped.
KEY_ESCAPE = str.maketrans({" ": r"\ ", ",": r"\,", "=": r"\="})


def escape(value) -> str:
    """Backslash-escape space, comma and equals in value"""
    return str(value).translate(KEY_ESCAPE)
