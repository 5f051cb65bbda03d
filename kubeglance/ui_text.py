"""Titles, hints and name filtering for resource tables."""

from __future__ import annotations

import re

COPY_HINT = "| copy <c>"
DESCRIBE_AND_YAML_HINT = "| describe <d> | yaml <y> "
DESCRIBE_YAML_AND_ESC_HINT = "| describe <d> | yaml <y> | back to menu <esc> "
DESCRIBE_YAML_DECODE_AND_ESC_HINT = (
    "| describe <d> | yaml <y> | decode <x> | back to menu <esc> "
)

DESCRIBE_ACTIVE = "-> Describe "
YAML_ACTIVE = "-> YAML "
ALL_NAMESPACES = "all"


def title_with_ns(title: str, ns: str, length: int) -> str:
    """Title followed by the namespace and the number of items."""
    return f"{title} (ns: {ns}) [{length}]"


def get_resource_title(
    title: str, suffix: str, items_len: int, ns: str | None = None
) -> str:
    """Title of a namespaced resource table; no namespace means all of them."""
    shown_ns = ns if ns is not None else ALL_NAMESPACES
    return f" {title_with_ns(title, shown_ns, items_len)} {suffix}"


def get_cluster_wide_resource_title(title: str, items_len: int, suffix: str) -> str:
    """Title of a cluster-wide resource table."""
    return f" {title} [{items_len}] {suffix}"


def get_describe_active(describe: bool) -> str:
    """Marker of the active detail view: describe output or YAML."""
    return DESCRIBE_ACTIVE if describe else YAML_ACTIVE


def _char_class(pattern: str, start: int) -> tuple[str, int] | None:
    """Translate a ``[...]`` class starting at ``start``; ``None`` if unclosed."""
    i = start + 1
    negate = i < len(pattern) and pattern[i] in "!^"
    if negate:
        i += 1
    body_start = i
    if i < len(pattern) and pattern[i] == "]":
        i += 1
    while i < len(pattern) and pattern[i] != "]":
        i += 1
    if i >= len(pattern):
        return None
    body = pattern[body_start:i]
    parts = []
    for ch in body:
        parts.append("-" if ch == "-" else re.escape(ch))
    inner = "".join(parts)
    if negate:
        return f"[^/{inner}]", i + 1
    return f"[{inner}]", i + 1


def _translate(pattern: str, start: int, in_brace: bool) -> tuple[str, int]:
    out = []
    i = start
    while i < len(pattern):
        ch = pattern[i]
        if in_brace and ch in ",}":
            break
        if ch == "\\" and i + 1 < len(pattern):
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif ch == "*":
            j = i
            while j < len(pattern) and pattern[j] == "*":
                j += 1
            out.append(".*" if j - i > 1 else "[^/]*")
            i = j
        elif ch == "?":
            out.append("[^/]")
            i += 1
        elif ch == "[":
            translated = _char_class(pattern, i)
            if translated is None:
                out.append(re.escape(ch))
                i += 1
            else:
                out.append(translated[0])
                i = translated[1]
        elif ch == "{":
            alternatives = []
            j = i + 1
            closed = False
            while True:
                sub, j = _translate(pattern, j, True)
                alternatives.append(sub)
                if j < len(pattern) and pattern[j] == ",":
                    j += 1
                    continue
                if j < len(pattern) and pattern[j] == "}":
                    j += 1
                    closed = True
                break
            if closed:
                out.append("(?:" + "|".join(alternatives) + ")")
                i = j
            else:
                out.append(re.escape(ch))
                i += 1
        else:
            out.append(re.escape(ch))
            i += 1
    return "".join(out), i


def glob_match(pattern: str, text: str) -> bool:
    """Match ``text`` against a glob with ``*``, ``**``, ``?``, ``[...]`` and ``{a,b}``."""
    regex, _ = _translate(pattern, 0, False)
    return re.fullmatch(regex, text, re.DOTALL) is not None


def filter_by_name(filter_text: str, name: str) -> bool:
    """Whether a resource name passes the filter, by glob or by substring, ignoring case."""
    ft = filter_text.lower()
    lowered = name.lower()
    return not ft or glob_match(ft, lowered) or ft in lowered