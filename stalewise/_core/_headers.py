from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Union,
)

from stalewise._utils import parse_non_negative_int

"""
HTTP token and quoted-string parsing utilities.

These functions implement RFC 7230 parsing rules for HTTP/1.1 tokens
and quoted strings.
"""


def is_char(c: str) -> bool:
    """
    Check if character is a valid ASCII character (0-127).

    Per RFC 7230: CHAR = any US-ASCII character (octets 0 - 127)
    """
    if not c:
        return False
    return ord(c) <= 127


def is_ctl(c: str) -> bool:
    """
    Check if character is a control character.

    Per RFC 7230: CTL = control characters (0-31 and 127)
    """
    if not c:
        return False
    b = ord(c)
    return b <= 31 or b == 127


def is_separator(c: str) -> bool:
    """
    Check if character is an HTTP separator.

    Per RFC 2616 Section 2.2:
    separators = "(" | ")" | "<" | ">" | "@"
               | "," | ";" | ":" | "\" | <">
               | "/" | "[" | "]" | "?" | "="
               | "{" | "}" | SP | HT
    """
    if not c:
        return False
    return c in '()<>@,;:\\"/[]?={} \t'


def is_token(c: str) -> bool:
    """
    Check if character is valid in an HTTP token.

    Per RFC 7230 Section 3.2.6:
    token = 1*tchar
    tchar = "!" / "#" / "$" / "%" / "&" / "'" / "*"
          / "+" / "-" / "." / "0"-"9" / "A"-"Z"
          / "^" / "_" / "`" / "a"-"z" / "|" / "~"

    Examples:
        >>> is_token('a')
        True
        >>> is_token('-')
        True
        >>> is_token(' ')
        False
        >>> is_token('=')
        False
    """
    return is_char(c) and not is_ctl(c) and not is_separator(c)


def http_unquote(raw: str) -> tuple[int, str]:
    r"""
    Unquote an HTTP quoted-string.

    Per RFC 7230 Section 3.2.6:
    quoted-string = DQUOTE *( qdtext / quoted-pair ) DQUOTE
    quoted-pair = "\" ( HTAB / SP / VCHAR / obs-text )

    The raw string must begin with a double quote ("). Only the first
    quoted string is parsed.

    Returns:
        Tuple of (eaten, result) where:
        - eaten: number of characters consumed, or -1 on failure
        - result: the unquoted string, or empty string on failure

    Examples:
        >>> http_unquote('"hello"')
        (7, 'hello')
        >>> http_unquote('"hello\\"world"')
        (14, 'hello"world')
        >>> http_unquote('"test')
        (-1, '')
    """
    if not raw or raw[0] != '"':
        return -1, ""

    buf: list[str] = []
    i = 1  # Start after opening quote

    while i < len(raw):
        b = raw[i]

        if b == '"':
            return i + 1, "".join(buf)
        elif b == "\\":
            if i + 1 >= len(raw):
                # Backslash at end of string - invalid
                return -1, ""
            buf.append(raw[i + 1])
            i += 2
        else:
            buf.append(b)
            i += 1

    # Reached end without finding closing quote
    return -1, ""


class Headers(MutableMapping[str, str]):
    """
    Case-insensitive, multi-value header container.

    Item assignment replaces every value stored under the name, ``add`` appends
    one more value, and reading an item joins the values with ``", "``.
    Any mapping (a plain dict, ``httpx.Headers``, ``requests`` structures) can be
    used to build one.
    """

    def __init__(self, headers: Optional[Mapping[str, Union[str, List[str]]]] = None) -> None:
        self._headers: Dict[str, List[str]] = {}
        if headers is None:
            return
        if isinstance(headers, Headers):
            self._headers = {k: v[:] for k, v in headers._headers.items()}
            return
        for key, value in headers.items():
            if isinstance(value, str):
                self._headers.setdefault(key.lower(), []).append(value)
            else:
                self._headers.setdefault(key.lower(), []).extend(value)

    def get_list(self, key: str) -> Optional[List[str]]:
        return self._headers.get(key.lower(), None)

    def add(self, key: str, value: str) -> None:
        self._headers.setdefault(key.lower(), []).append(value)

    def remove(self, key: str) -> None:
        self._headers.pop(key.lower(), None)

    def copy(self) -> "Headers":
        return Headers(self)

    def __getitem__(self, key: str) -> str:
        return ", ".join(self._headers[key.lower()])

    def __setitem__(self, key: str, value: str) -> None:
        self._headers[key.lower()] = [value]

    def __delitem__(self, key: str) -> None:
        del self._headers[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"

    def __str__(self) -> str:
        return str(self._headers)

    def __eq__(self, other_headers: Any) -> bool:
        return isinstance(other_headers, Headers) and self._headers == other_headers._headers


class Vary:
    def __init__(self, values: List[str]) -> None:
        self.values = values

    @property
    def matches_nothing(self) -> bool:
        """A Vary member of "*" means no later request can ever match."""
        return "*" in self.values

    @classmethod
    def from_value(cls, vary_value: Optional[str]) -> "Vary":
        values = []

        for field_name in (vary_value or "").split(","):
            field_name = field_name.strip().lower()
            if field_name:
                values.append(field_name)
        return Vary(values)


class CacheDirectives(Dict[str, Optional[str]]):
    """
    Parsed Cache-Control (or Pragma) directives.

    Keys are lowercase directive names, values are the directive argument
    or None when the directive was given without ``=value``. Unknown
    directives are kept as they are so they can be passed through.

    Examples:
        >>> directives = parse_cache_control("public, max-age=3600")
        >>> "public" in directives
        True
        >>> directives.seconds("max-age")
        3600
    """

    def seconds(self, name: str) -> Optional[int]:
        """
        Returns the delta-seconds argument of a directive.

        A directive that is missing, has no argument, or whose argument is not
        a non-negative integer is reported as None.
        """
        return parse_non_negative_int(self.get(name))

    def __str__(self) -> str:
        return format_cache_control(self) or ""


def _skip(value: str, i: int, chars: str) -> int:
    while i < len(value) and value[i] in chars:
        i += 1
    return i


def parse(value: str) -> CacheDirectives:
    """
    Parse a Cache-Control header value character by character.

    The parser is lenient: stray commas, whitespace around
    ``=``, quoted arguments and unknown directives are all accepted, and
    characters that cannot start a directive are skipped. When a directive
    appears more than once the last occurrence wins.

    Args:
        value: The Cache-Control header value string

    Returns:
        CacheDirectives with parsed directives
    """
    directives = CacheDirectives()

    i = 0
    length = len(value)

    while i < length:
        # Skip leading whitespace and commas
        i = _skip(value, i, " \t,")

        if i >= length:
            break

        # Find end of token
        j = i
        while j < length and is_token(value[j]):
            j += 1

        if j == i:
            # No valid token found, skip this character
            i += 1
            continue

        token = value[i:j].lower()

        j = _skip(value, j, " \t")

        if j < length and value[j] == "=":
            k = _skip(value, j + 1, " \t")

            if k >= length or value[k] == ",":
                # Directive ends with '=' but no value
                directives[token] = ""
                i = k
                continue

            if value[k] == '"':
                eaten, result = http_unquote(value[k:])
                if eaten == -1:
                    # Quote mismatch, take the rest of the member without quotes
                    end = value.find(",", k)
                    end = length if end == -1 else end
                    result = value[k:end].strip().strip('"')
                    i = end
                else:
                    i = k + eaten
                directives[token] = result
            else:
                z = k
                while z < length and value[z] not in " \t,":
                    z += 1
                directives[token] = value[k:z]
                i = z
        else:
            directives[token] = None
            i = j

    return directives


def parse_cache_control(value: Optional[str]) -> CacheDirectives:
    """
    Parse a Cache-Control header from either a request or response.

    This is the main entry point for parsing. It never raises: a missing
    or unparsable header simply yields no directives.

    Examples:
        >>> cc = parse_cache_control(",,,,max-age =  456      ,")
        >>> cc
        {'max-age': '456'}

        >>> cc = parse_cache_control('  max-age = "678"      ')
        >>> cc.seconds("max-age")
        678

        >>> cc = parse_cache_control("pre-check=0, post-check=0, no-store")
        >>> cc["no-store"] is None
        True
    """
    if not value:
        return CacheDirectives()
    return parse(value)


def format_cache_control(directives: Mapping[str, Optional[str]]) -> Optional[str]:
    """
    Render directives back into a header value.

    Returns None when there is nothing to render, so callers can drop the header.

    Examples:
        >>> format_cache_control({"max-age": "100", "custom": None})
        'max-age=100, custom'
    """
    parts = []
    for name, value in directives.items():
        if value is None:
            parts.append(name)
        elif value and all(is_token(c) for c in value):
            parts.append(f"{name}={value}")
        else:
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{name}="{escaped}"')
    if not parts:
        return None
    return ", ".join(parts)


def _split_outside_quotes(value: str) -> List[str]:
    parts = []
    buf: List[str] = []
    quoted = False
    i = 0

    while i < len(value):
        c = value[i]
        if quoted and c == "\\" and i + 1 < len(value):
            # quoted-pair
            buf.append(value[i : i + 2])
            i += 2
            continue
        if c == '"':
            quoted = not quoted
        elif c == "," and not quoted:
            parts.append("".join(buf))
            buf = []
            i += 1
            continue
        buf.append(c)
        i += 1

    parts.append("".join(buf))
    return parts


def strip_informational_warnings(values: Iterable[str]) -> List[str]:
    """
    Drops 1xx warn-codes from Warning header values.

    RFC 7234 Section 5.5: 1xx warnings describe the freshness or revalidation
    status of the response and MUST be deleted after a successful
    revalidation; 2xx warnings are kept.

    Warning values are split on commas outside quoted strings, so a warn-date
    such as ``"Sat, 25 Aug 2012 23:34:45 GMT"`` stays with its warning.

    Examples:
        >>> strip_informational_warnings(["199 test danger, 200 ok ok"])
        ['200 ok ok']
    """
    kept = []
    for value in values:
        for warning in _split_outside_quotes(value):
            warning = warning.strip()
            if not warning:
                continue
            if len(warning) >= 3 and warning[0] == "1" and warning[1:3].isdigit():
                continue
            kept.append(warning)
    return kept
