"""
PostgreSQL-aware whitespace and comment minifier.

Comments are dropped and whitespace runs collapse to a single space, while
quoted strings, escape strings, quoted identifiers and dollar-quoted bodies are
copied untouched. `$1`-style placeholders are single tokens, so a dollar quote
may follow one directly.
"""

import re

from pgcompose.errors import minify_error

# ==================================================
# Tokens
# ==================================================

_TOKEN_PATTERN = re.compile(
    r"""
      (?P<space>\s+)
    | (?P<line_comment>--[^\n]*)
    | (?P<block_comment>/\*)
    | (?P<escape_string>(?<![\w$])[eE]'(?:[^'\\]|\\.|'')*')
    | (?P<string>'(?:[^']|'')*')
    | (?P<identifier>"(?:[^"]|"")*")
    | (?P<placeholder>\$\d+)
    | (?P<dollar_quote>(?<![^\W\d])(?<!\$)\$(?:[^\W\d]\w*)?\$)
    | (?P<unterminated>(?<![\w$])[eE]'|['"])
    | (?P<text>[^\s'"$/\-eE]+|.)
    """,
    re.VERBOSE | re.DOTALL,
)

_UNTERMINATED_REASONS = {
    '"': "Unterminated quoted identifier",
    "'": "Unterminated string literal",
}


def _skip_block_comment(text: str, start: int) -> int:
    # Block comments nest in PostgreSQL.
    depth = 0
    pos = start
    while pos < len(text):
        if text.startswith("/*", pos):
            depth += 1
            pos += 2
        elif text.startswith("*/", pos):
            depth -= 1
            pos += 2
            if depth == 0:
                return pos
        else:
            pos += 1
    raise minify_error(reason="Unterminated block comment", text=text, position=start)


def _skip_dollar_quote(text: str, start: int, tag: str) -> int:
    close = text.find(tag, start + len(tag))
    if close == -1:
        raise minify_error(reason="Unterminated dollar-quoted string", text=text, position=start)
    return close + len(tag)


# ==================================================
# Minifier
# ==================================================

def minify(text: str) -> str:
    """
    Removes comments and collapses incidental whitespace in SQL text.

    Raises:
        MinifyError: If a string, identifier, dollar quote or block comment is
            never closed.
    """
    parts: list[str] = []
    pending_space = False
    pos = 0

    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        kind = match.lastgroup
        end = match.end()

        if kind in ("space", "line_comment"):
            pending_space = True
        elif kind == "block_comment":
            end = _skip_block_comment(text, pos)
            pending_space = True
        else:
            if kind == "unterminated":
                reason = _UNTERMINATED_REASONS[match.group()[-1]]
                raise minify_error(reason=reason, text=text, position=pos)
            if kind == "dollar_quote":
                end = _skip_dollar_quote(text, pos, match.group())
            if pending_space and parts:
                parts.append(" ")
            pending_space = False
            parts.append(text[pos:end])

        pos = end

    return "".join(parts)
