"""
Browser regex dialect.

Patterns are authored for the form renderer, which evaluates them with
JavaScript RegExp semantics (no flags). Python's `re` differs in ways that
let values through that the renderer would reject:

- `$` also matches before a trailing newline
- `\\d`, `\\w` and `\\b` are Unicode-aware
- `.` matches `\\r` and the line/paragraph separators

translate_pattern() rewrites a source so that `re` behaves like RegExp, and
compile_pattern() compiles the result with re.ASCII.
"""

import re
from re import Pattern

# RegExp \s: WhiteSpace and LineTerminator code points
_JS_SPACE = "\\t\\n\\v\\f\\r \\u00a0\\u1680\\u2000-\\u200a\\u2028\\u2029\\u202f\\u205f\\u3000\\ufeff"

# RegExp `.` without the s flag stops at line terminators
_JS_DOT = "[^\\n\\r\\u2028\\u2029]"

_GROUP_NAME = re.compile(r"[A-Za-z_]\w*>")


def translate_pattern(source: str) -> str:
    """
    Rewrite a RegExp source into an equivalent `re` source.

    Escapes are copied through except `\\s`/`\\S`; character classes are
    copied through except `\\s`. `\\S` inside a class keeps its ASCII
    meaning.

    Args:
        source: RegExp pattern source (without slashes or flags)

    Returns:
        Pattern source for re.compile(..., re.ASCII)
    """
    out: list[str] = []
    in_class = False
    i = 0
    n = len(source)

    while i < n:
        ch = source[i]

        if ch == "\\" and i + 1 < n:
            escaped = source[i + 1]
            if escaped == "s":
                out.append(_JS_SPACE if in_class else f"[{_JS_SPACE}]")
            elif escaped == "S" and not in_class:
                out.append(f"[^{_JS_SPACE}]")
            elif escaped == "k" and not in_class and source.startswith("<", i + 2) and ">" in source[i + 3:]:
                end = source.index(">", i + 3)
                out.append(f"(?P={source[i + 3:end]})")
                i = end + 1
                continue
            else:
                out.append(source[i:i + 2])
            i += 2
            continue

        if in_class:
            if ch == "]":
                in_class = False
            out.append(ch)
            i += 1
            continue

        if ch == "[":
            negated = source.startswith("^", i + 1)
            start = i + 2 if negated else i + 1
            if source.startswith("]", start):
                # RegExp [] never matches, [^] matches anything
                out.append("[\\s\\S]" if negated else "(?!)")
                i = start + 1
                continue
            out.append("[^" if negated else "[")
            in_class = True
            i = start
            continue

        if ch == "$":
            out.append("\\Z")
        elif ch == ".":
            out.append(_JS_DOT)
        elif ch == "(" and source.startswith("?<", i + 1) and _GROUP_NAME.match(source, i + 3):
            out.append("(?P<")
            i += 3
            continue
        else:
            out.append(ch)
        i += 1

    return "".join(out)


def compile_pattern(source: str) -> Pattern:
    """
    Compile a RegExp source with browser semantics.

    Raises:
        re.error: If the translated pattern does not compile
    """
    return re.compile(translate_pattern(source), re.ASCII)
