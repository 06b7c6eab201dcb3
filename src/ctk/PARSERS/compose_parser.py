# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Parser for docker-compose templates with marker-delimited container regions.

A container region looks like::

      # -- redis --
      redis:
        image: redis:7
      # // redis //

The compose file is never loaded as YAML; it is split into plain text and
regions so whole regions can be dropped without touching anything else.
"""
import re
from typing import Iterable, List, Optional, Pattern

from ..MODELS.compose_segment import ComposeSegment

START_MARKER = re.compile(r"^  # -- (?P<identifier>[\w-]+) --$")
END_MARKER = re.compile(r"^  # // (?P<identifier>[\w-]+) //$")


def start_marker(identifier: str) -> str:
    """The start marker line for ``identifier``, without line terminator."""
    return f"  # -- {identifier} --"


def end_marker(identifier: str) -> str:
    """The end marker line for ``identifier``, without line terminator."""
    return f"  # // {identifier} //"


class ComposeParser:
    """
    Splits compose text into segments and renders it back.
    """

    def parse(self, content: str) -> List[ComposeSegment]:
        """
        Parses compose text into plain text and container regions.

        A region starts at a start marker line and ends at the nearest
        following end marker line with the same identifier. A start marker
        with no matching end marker stays plain text. Regions are assumed not
        to nest: markers inside a region become part of its body.

        :param content: Text of the compose file.
        :return: Segments whose concatenated ``text`` equals ``content``.
        """
        lines = self._split_lines(content)
        segments: List[ComposeSegment] = []
        pending: List[str] = []

        i = 0
        while i < len(lines):
            identifier = self._marker_identifier(lines[i], START_MARKER)
            if identifier is not None:
                end = self._find_end(lines, i + 1, identifier)
                if end is not None:
                    if pending:
                        segments.append(ComposeSegment(body="".join(pending)))
                        pending = []
                    segments.append(ComposeSegment(
                        identifier=identifier,
                        start_marker=lines[i],
                        body="".join(lines[i + 1:end]),
                        end_marker=lines[end],
                    ))
                    i = end + 1
                    continue
            pending.append(lines[i])
            i += 1

        if pending:
            segments.append(ComposeSegment(body="".join(pending)))
        return segments

    def render(self, segments: Iterable[ComposeSegment], remove: Iterable[str] = ()) -> str:
        """
        Renders segments back to text without any marker lines.

        :param segments: Parsed segments.
        :param remove: Identifiers whose regions are dropped entirely.
        :return: The edited compose text.
        """
        remove = set(remove)
        parts = []
        for segment in segments:
            if segment.is_region and segment.identifier in remove:
                continue
            parts.append(self.strip_markers(segment.body))
        return "".join(parts)

    def strip_markers(self, content: str) -> str:
        """
        Removes every start and end marker line, whatever its identifier.

        :param content: Compose text.
        :return: The text with marker lines removed.
        """
        return "".join(
            line for line in self._split_lines(content)
            if self._marker_identifier(line, START_MARKER) is None
            and self._marker_identifier(line, END_MARKER) is None
        )

    def _find_end(self, lines: List[str], start: int, identifier: str) -> Optional[int]:
        """
        Index of the nearest end marker for ``identifier`` at or after ``start``.
        """
        for i in range(start, len(lines)):
            if self._marker_identifier(lines[i], END_MARKER) == identifier:
                return i
        return None

    def _marker_identifier(self, line: str, pattern: Pattern) -> Optional[str]:
        match = pattern.match(line.rstrip("\r\n"))
        return match.group("identifier") if match else None

    def _split_lines(self, content: str) -> List[str]:
        """
        Splits on newlines only, keeping each line's terminator.
        """
        lines = content.split("\n")
        result = [line + "\n" for line in lines[:-1]]
        if lines[-1]:
            result.append(lines[-1])
        return result
