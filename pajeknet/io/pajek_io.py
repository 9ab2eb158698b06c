"""Reader and writer for the Pajek ``.net`` subset.

Supported input::

    *vertices N
    1 "vertex 1 name" [x y z]
    ...
    N "vertex N name" [x y z]

    *edges          (undirected, one "Vi Vj weight" per line)
    *edgeslist      (undirected, "Vi Vj Vk ..." = Vi-Vj, Vi-Vk, ...)
    *arcs           (directed, one "Vi Vj weight" per line)
    *arcslist       (directed, "Vi Vj Vk ..." = Vi->Vj, Vi->Vk, ...)

Fields are separated by any mix of spaces and tabs. Blank lines and lines
starting with ``/*`` are skipped. Section markers are case-insensitive; vertex
names are not. The single ``*vertices`` section must precede every edge
section; edge sections may repeat and interleave. Other ``*`` sections are
skipped along with their content.
"""

from __future__ import annotations

import io
import os
import warnings
from enum import Enum

import numpy as np

try:
    from ..core.graph import Network
except Exception:
    from pajeknet.core.graph import Network

from ._utils import (
    count_to_string,
    format_weight,
    iter_lines,
    split_line,
    split_vertex_line,
    try_parse_coordinates,
    try_parse_float,
    try_parse_int,
)
from .errors import PajekFormatError

SECTION_MARKER = "*"
VERTICES_MARKER = "*vertices"
LINE_TERMINATOR = "\r\n"
DEFAULT_EDGE_WEIGHT = 1.0

VERTICES_HEADER_FORMAT = "*vertices N"
VERTEX_FORMAT = 'N "vertex name" [x y z]'
EDGE_FORMAT = "Vi Vj weight"
EDGE_LIST_FORMAT = "Vi Vj Vk ..."


class _Section(Enum):
    BEFORE_VERTICES = "before_vertices"
    VERTICES = "vertices"
    EDGES = "*edges"
    EDGES_LIST = "*edgeslist"
    ARCS = "*arcs"
    ARCS_LIST = "*arcslist"
    UNRECOGNIZED = "unrecognized"


_EDGE_SECTIONS = {
    s.value: s for s in (_Section.EDGES, _Section.EDGES_LIST, _Section.ARCS, _Section.ARCS_LIST)
}
_DIRECTED_SECTIONS = frozenset({_Section.ARCS, _Section.ARCS_LIST})
_LIST_SECTIONS = frozenset({_Section.EDGES_LIST, _Section.ARCS_LIST})


class _PajekReader:
    """Section state machine fed one meaningful line at a time.

    Vertices and edges are collected as plain records; the network is only
    built by :meth:`finish`, so a failed parse never leaves a partial network.
    """

    def __init__(self):
        self.section = _Section.BEFORE_VERTICES
        self.vertices_expected = None  # None until the *vertices line is read
        self.vertex_rows = []
        self.edge_rows = []  # (first, second, weight, directed); one-based numbers

    def feed(self, line_number: int, line: str) -> None:
        if line.startswith(SECTION_MARKER):
            self.section = self._next_section(line_number, line)
            return

        section = self.section
        if section is _Section.VERTICES:
            self._parse_vertex(line_number, line)
        elif section in _LIST_SECTIONS:
            self._parse_edge_list(line_number, line, section in _DIRECTED_SECTIONS)
        elif section in (_Section.EDGES, _Section.ARCS):
            self._parse_edge(line_number, line, section in _DIRECTED_SECTIONS)
        # BEFORE_VERTICES and UNRECOGNIZED content is dropped.

    def finish(self) -> Network:
        self._check_vertex_count()

        graph = Network()
        ids = graph.add_vertices_bulk(self.vertex_rows)
        graph.add_edges_bulk(
            {
                "source": ids[first - 1],
                "target": ids[second - 1],
                "weight": weight,
                "edge_directed": directed,
            }
            for first, second, weight, directed in self.edge_rows
        )
        return graph

    # Sections

    def _next_section(self, line_number: int, line: str) -> _Section:
        lowered = line.lower()

        if lowered.startswith(VERTICES_MARKER):
            if self.vertices_expected is not None:
                raise PajekFormatError.at_line(
                    line, line_number, "There can't be more than one *vertices section."
                )
            fields = split_line(lowered)
            count = try_parse_int(fields[1]) if len(fields) == 2 else None
            if count is None or count < 0:
                raise PajekFormatError.expected_format(line, line_number, VERTICES_HEADER_FORMAT)
            self.vertices_expected = count
            return _Section.VERTICES

        self._check_vertex_count(line_number, line)

        section = _EDGE_SECTIONS.get(lowered)
        if section is None:
            return _Section.UNRECOGNIZED
        if self.vertices_expected is None:
            raise PajekFormatError.at_line(
                line,
                line_number,
                f"There can't be an {section.value} section without a *vertices section.",
            )
        return section

    def _check_vertex_count(self, line_number=None, line=None) -> None:
        if self.section is not _Section.VERTICES:
            return
        parsed = len(self.vertex_rows)
        if parsed != self.vertices_expected:
            raise PajekFormatError(
                f"The *vertices section specified {count_to_string(self.vertices_expected)}"
                f" but contained {count_to_string(parsed)}.",
                line_number=line_number,
                line=line,
            )

    # Records

    def _parse_vertex(self, line_number: int, line: str) -> None:
        parsed = len(self.vertex_rows)
        if parsed == self.vertices_expected:
            raise PajekFormatError(
                "There are too many vertices in the *vertices section, which specified only"
                f" {count_to_string(self.vertices_expected)} on the *vertices line.",
                line_number=line_number,
                line=line,
            )

        parts = split_vertex_line(line)
        ordinal = try_parse_int(parts[0]) if parts is not None else None
        if ordinal is None:
            raise PajekFormatError.expected_format(line, line_number, VERTEX_FORMAT)
        if ordinal != parsed + 1:
            raise PajekFormatError.at_line(
                line, line_number, "Vertices must be numbered consecutively starting at 1."
            )

        _, name, rest = parts
        x = y = 0.0
        coordinates = try_parse_coordinates(rest)
        if coordinates is not None:
            x, y, _z = coordinates
            if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
                raise PajekFormatError.at_line(
                    line, line_number, "Vertex coordinates must be between 0 and 1.0."
                )

        self.vertex_rows.append({"name": name, "x": x, "y": y})

    def _parse_edge(self, line_number: int, line: str, directed: bool) -> None:
        fields = split_line(line)
        first = second = weight = None
        if len(fields) >= 3:
            first = try_parse_int(fields[0])
            second = try_parse_int(fields[1])
            weight = try_parse_float(fields[2])
        if first is None or second is None or weight is None:
            raise PajekFormatError.expected_format(line, line_number, EDGE_FORMAT)

        self._check_vertex_number(first, line_number, line)
        self._check_vertex_number(second, line_number, line)
        self.edge_rows.append((first, second, weight, directed))

    def _parse_edge_list(self, line_number: int, line: str, directed: bool) -> None:
        fields = split_line(line)
        if len(fields) < 2:
            raise PajekFormatError.expected_format(line, line_number, EDGE_LIST_FORMAT)

        first = None
        for field in fields:
            number = try_parse_int(field)
            if number is None:
                raise PajekFormatError.expected_format(line, line_number, EDGE_LIST_FORMAT)
            self._check_vertex_number(number, line_number, line)
            if first is None:
                first = number
            else:
                self.edge_rows.append((first, number, DEFAULT_EDGE_WEIGHT, directed))

    def _check_vertex_number(self, number: int, line_number: int, line: str) -> None:
        if number < 1:
            raise PajekFormatError.at_line(line, line_number, "Vertex numbers must be greater than 0.")
        if number > self.vertices_expected:
            raise PajekFormatError.at_line(
                line, line_number, "Vertex numbers can't be greater than the number of vertices."
            )


def _read(stream) -> Network:
    reader = _PajekReader()
    for line_number, line in iter_lines(stream):
        reader.feed(line_number, line)
    return reader.finish()


def parse(source, *, encoding: str = "utf-8-sig") -> Network:
    """Build a :class:`~pajeknet.core.graph.Network` from Pajek text.

    Parameters
    --
    source : str, bytes, or file-like
        The file contents, or an open text or binary stream. Streams are read
        to the end but not closed.
    encoding : str
        Used to decode bytes and binary streams.

    Returns
    ---
    Network
        Vertices in file order, edges in file order. Directedness follows from
        the sections present: only ``*edges``/``*edgeslist`` (or no edges) is
        undirected, only ``*arcs``/``*arcslist`` is directed, both is mixed.

    Raises
    --
    TypeError
        If ``source`` is ``None`` or not text, bytes or a stream.
    PajekFormatError
        On the first line that breaks the format, or on a vertex count mismatch.

    """
    if source is None:
        raise TypeError("parse: source argument can't be None.")

    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode(encoding)
    if isinstance(source, str):
        if source.startswith("\ufeff"):
            source = source[1:]
        return _read(io.StringIO(source, newline=None))

    if not hasattr(source, "read"):
        raise TypeError(
            f"parse: source must be a string, bytes or a stream, not {type(source).__name__}."
        )

    if isinstance(source, io.TextIOBase):
        return _read(source)
    # Other text-mode objects only promise read(); read(0) consumes nothing.
    if isinstance(source.read(0), str):
        return _read(io.StringIO(source.read(), newline=None))

    text = io.TextIOWrapper(source, encoding=encoding, newline=None)
    try:
        return _read(text)
    finally:
        text.detach()


def from_pajek(path, *, encoding: str = "utf-8-sig") -> Network:
    """Read a Pajek file.

    Missing files and directories surface as the built-in
    ``FileNotFoundError``; format problems as :class:`PajekFormatError`.
    """
    _check_path("from_pajek", path)
    with open(path, encoding=encoding) as f:
        return _read(f)


def _check_path(caller: str, path) -> None:
    if path is None:
        raise TypeError(f"{caller}: path argument can't be None.")
    if os.fspath(path) == "":
        raise ValueError(f"{caller}: path argument must have a length greater than zero.")


# Writing


def _normalized_locations(locations: np.ndarray) -> np.ndarray:
    """Min-max scale each axis to [0, 1]; a degenerate axis maps to 0."""
    low = locations.min(axis=0)
    span = locations.max(axis=0) - low
    scaled = (locations - low) / np.where(span > 0, span, 1.0)
    scaled = np.where(span > 0, scaled, 0.0)
    return np.clip(scaled, 0.0, 1.0)


def serialize(graph: Network) -> str:
    """Render ``graph`` as Pajek text with ``\\r\\n`` line endings.

    Locations are rescaled per axis so the written coordinates span [0, 1];
    the network itself is not modified. Undirected edges go to ``*edges`` and
    directed edges to ``*arcs``, each section listing its edges newest first.
    Unweighted edges are written with weight 1.
    """
    if graph is None:
        raise TypeError("serialize: graph argument can't be None.")

    vertex_ids = graph.vertices()
    lines = [f"{VERTICES_MARKER} {len(vertex_ids)}"]

    if vertex_ids:
        names = graph.vertex_attributes.get_column("name").to_list()
        locations = _normalized_locations(graph.vertex_locations())
        numbers = {}
        for number, (vid, name, (x, y)) in enumerate(zip(vertex_ids, names, locations), start=1):
            name = name or ""
            if '"' in name or "\n" in name or "\r" in name:
                warnings.warn(
                    f"Pajek export is lossy: the name of vertex {vid!r} ({name!r}) "
                    "contains a quote or line break and won't read back unchanged.",
                    UserWarning,
                    stacklevel=2,
                )
            lines.append(f'{number} "{name}" {x:.6f} {y:.6f} 0')
            numbers[vid] = number

        for marker, edge_ids in (
            ("*edges", graph.get_undirected_edges()),
            ("*arcs", graph.get_directed_edges()),
        ):
            if not edge_ids:
                continue
            lines.append(marker)
            for eid in reversed(edge_ids):
                source, target = graph.get_edge(eid)
                weight = graph.get_edge_weight(eid, DEFAULT_EDGE_WEIGHT)
                lines.append(f"{numbers[source]} {numbers[target]} {format_weight(weight)}")

    return LINE_TERMINATOR.join(lines) + LINE_TERMINATOR


def to_pajek(graph: Network, path, *, encoding: str = "utf-8") -> None:
    """Write ``graph`` to ``path`` in Pajek format (see :func:`serialize`)."""
    if graph is None:
        raise TypeError("to_pajek: graph argument can't be None.")
    _check_path("to_pajek", path)
    text = serialize(graph)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)
