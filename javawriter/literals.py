"""
Pure helpers for building Java source fragments.
"""

_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\b': '\\b',
    '\t': '\\t',
    '\n': '\\n',
    '\f': '\\f',
    '\r': '\\r',
}


def _is_iso_control(c: str) -> bool:
    code = ord(c)
    return code <= 0x1F or 0x7F <= code <= 0x9F


def string_literal(data: str) -> str:
    """Return `data` as a double-quoted, escaped Java string literal."""
    result = ['"']
    for c in data:
        if c in _ESCAPES:
            result.append(_ESCAPES[c])
        elif _is_iso_control(c):
            result.append(f"\\u{ord(c):04x}")
        else:
            result.append(c)
    result.append('"')
    return ''.join(result)


def type_name(raw: str, *parameters: str) -> str:
    """Build a type string, e.g. type_name("java.util.Map", "K", "V") -> "java.util.Map<K, V>"."""
    if not parameters:
        return raw
    return f"{raw}<{', '.join(parameters)}>"


def format_text(pattern: str, args: tuple) -> str:
    """Interpolate `args` into `pattern` with %-formatting, if any were given."""
    if args:
        return pattern % args
    return pattern
