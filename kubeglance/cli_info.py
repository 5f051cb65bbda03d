"""Versions of command line tools found on the machine."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

NOT_FOUND = "Not found"


@dataclass(frozen=True)
class CliInfo:
    """A tool, whether it was found, and its version."""

    name: str
    status: bool
    version: str


def build_cli(name: str, version: str | None) -> CliInfo:
    """Tool entry; a missing version marks the tool as not found."""
    return CliInfo(
        name=name,
        status=version is not None,
        version=version if version is not None else NOT_FOUND,
    )


def get_info_by_regex(text: str, pattern: str) -> str | None:
    """First capture group of ``pattern`` found in ``text``, if any."""
    try:
        regex = re.compile(pattern)
    except re.error:
        return None
    match = regex.search(text)
    if match is None or regex.groups < 1:
        return None
    return match.group(1)


def _index(value: Any, key: str) -> Any:
    return value.get(key) if isinstance(value, dict) else None


def _render(value: Any) -> str:
    if value is None:
        text = "null"
    else:
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return text.replace('"', "")


def parse_kubectl_versions(output: str) -> tuple[str | None, str | None]:
    """Client and server git versions from ``kubectl version -o json`` output."""
    try:
        data = json.loads(output)
    except ValueError:
        return None, None
    client = _index(_index(data, "clientVersion"), "gitVersion")
    server = _index(_index(data, "serverVersion"), "gitVersion")
    return _render(client), _render(server)


def format_prefixed_version(output: str) -> str | None:
    """A version printed by a tool, prefixed with ``v`` and without quotes."""
    text = output.rstrip("\r\n")
    if not text:
        return None
    return "v" + text.replace("'", "")