# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import re

from .ua_logging import Logger

log = Logger(__name__)

# Tried in this order at every position of the raw string; the first rule that
# matches there produces the next segment.
SEGMENT_RULES = (
    re.compile(r"[0-9]+-[0-9]+"),
    re.compile(r"[0-9]+[a-zA-Z]+\Z"),
    re.compile(r"[0-9]+"),
    re.compile(r"[A-Za-z][0-9A-Za-z-]*\Z"),
)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def tokenize(raw: str) -> tuple[str, ...]:
    """Split a version string into segments, e.g. '10.2.3b' -> ('10', '2', '3b').

    Characters where no rule matches (dots, spaces, stray punctuation) are
    skipped, so an unusual string yields fewer segments instead of an error.
    """
    segments: list[str] = []
    pos = 0
    while pos < len(raw):
        for rule in SEGMENT_RULES:
            m = rule.match(raw, pos)
            if m:
                segments.append(m.group())
                pos = m.end()
                break
        else:
            pos += 1
    return tuple(segments)


def _parse_int(segment: str) -> int | None:
    if _INTEGER.fullmatch(segment):
        return int(segment)
    return None


def compare_segments(a: str, b: str) -> int:
    """Compare two segments numerically if both are integers, else lexically."""
    a_int, b_int = _parse_int(a), _parse_int(b)
    if a_int is not None and b_int is not None:
        return (a_int > b_int) - (a_int < b_int)

    if log.is_enabled_for("debug"):
        log.debug(f"Comparing segments '{a}' and '{b}' lexically")
    return (a > b) - (a < b)


class Version:
    """A browser or software version such as ``10.2.3b``.

    ``Version("10.2.3b")`` keeps the (stripped) string and tokenizes it on
    first use. ``Version(10, 2, None, 3)`` takes the non-None parts as the
    segments and joins them with dots.
    """

    def __init__(self, *parts: object) -> None:
        self._segments: tuple[str, ...] | None
        if len(parts) == 1 and isinstance(parts[0], str):
            self._raw = parts[0].strip()
            self._segments = None
        else:
            self._segments = tuple(str(p).strip() for p in parts if p is not None)
            self._raw = ".".join(self._segments)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def segments(self) -> tuple[str, ...]:
        # Unsynchronized: tokenize() is pure, so concurrent first readers can
        # only store equal tuples, and the assignment publishes a finished one.
        if self._segments is None:
            self._segments = tokenize(self._raw)
        return self._segments

    def _segment(self, index: int) -> str | None:
        segments = self.segments
        return segments[index] if index < len(segments) else None

    @property
    def major(self) -> str | None:
        return self._segment(0)

    @property
    def minor(self) -> str | None:
        return self._segment(1)

    @property
    def patch(self) -> str | None:
        return self._segment(2)

    @property
    def patch_minor(self) -> str | None:
        return self._segment(3)

    @staticmethod
    def coerce(other: object) -> "Version":
        """Build a Version from the string form of `other`.

        Note: a Version operand is rebuilt from str() as well, not returned
        as is. For multi-part versions the rebuilt segments come from
        tokenizing the joined string and can differ from the original parts.
        """
        # None is rejected rather than read as "", which would make it equal
        # to every version.
        if other is None:
            raise TypeError("Cannot compare a Version with None")
        return Version(str(other))

    def compare(self, other: object) -> int:
        """Three-way compare: -1, 0 or 1.

        Only the common prefix of both segment lists is compared, so
        "1.2" and "1.2.0" are equal.
        """
        other_segments = Version.coerce(other).segments
        for mine, theirs in zip(self.segments, other_segments):
            if mine != theirs:
                return compare_segments(mine, theirs)
        return 0

    def _compare_or_none(self, other: object) -> int | None:
        if other is None:
            return None
        return self.compare(other)

    def __eq__(self, other: object) -> bool:
        result = self._compare_or_none(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other: object) -> bool:
        result = self._compare_or_none(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare_or_none(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare_or_none(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare_or_none(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def identical_to(self, other: object) -> bool:
        """Strict equality: same class and the very same raw string."""
        return type(self) is type(other) and self._raw == other.raw  # type: ignore[attr-defined]

    # == only compares the common prefix and is not transitive, so no hash
    # can agree with it.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._raw}>"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "version": self._raw,
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "patch_minor": self.patch_minor,
        }
