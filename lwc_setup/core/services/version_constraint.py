"""
Version constraint — minimum-version checks (pure).

No I/O, no subprocess.
"""

from __future__ import annotations

import re

_SUFFIX_RE = re.compile(r"[-+].*$")


def parse_version(version: str) -> tuple[int, int, int]:
    """Parse ``"v8.12.0"`` into ``(8, 12, 0)``.

    Missing components count as zero; pre-release and build suffixes
    (``-rc.1``, ``+build``) are ignored.

    Raises:
        ValueError: If a component is not numeric.
    """
    core = _SUFFIX_RE.sub("", version.strip().lstrip("v"))
    parts = [int(x) for x in core.split(".")[:3]]
    while len(parts) < 3:
        parts.append(0)
    return parts[0], parts[1], parts[2]


def version_satisfies(version: str, minimum: str, mode: str = "semver") -> bool:
    """Check ``version >= minimum``.

    Modes:
        - ``semver``: numeric comparison of (major, minor, patch).
          Falls back to ``lexical`` when either side does not parse.
        - ``lexical``: plain string comparison. ``"10.0.0"`` sorts
          before ``"8.12.0"`` here; only use it to match legacy behaviour.
    """
    if mode == "semver":
        try:
            return parse_version(version) >= parse_version(minimum)
        except ValueError:
            pass
    return version.strip().lstrip("v") >= minimum.strip().lstrip("v")
