from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

import numpy as np
import polars as pl


class Directedness(Enum):
    UNDIRECTED = "UNDIRECTED"
    DIRECTED = "DIRECTED"
    MIXED = "MIXED"


class Network:
    """Multigraph with per-edge directedness, vertex names and 2-D locations.

    Vertices and edges are addressed by string IDs. Vertex attributes live in a
    Polars DF (DataFrame) with the canonical columns ``vertex_id``, ``name``,
    ``x`` and ``y``; edge structure, weights and directedness live in plain
    dicts keyed by edge ID. Parallel edges and self-loops are kept as distinct
    edges.

    Parameters
    --
    directed : bool, optional
        Default directedness for ``add_edge`` calls that do not pass
        ``edge_directed``. The network's reported :attr:`directedness` is always
        inferred from the edges actually present.

    Notes
    -
    - Vertex and edge iteration follow creation order.
    - A network without edges reports ``Directedness.UNDIRECTED``.

    """

    _VERTEX_SCHEMA = {
        "vertex_id": pl.Utf8,
        "name": pl.Utf8,
        "x": pl.Float64,
        "y": pl.Float64,
    }

    def __init__(self, directed: bool = False):
        self.directed = directed

        # Vertex mappings
        self.vertex_to_idx = {}  # vertex_id -> row in vertex_attributes
        self.idx_to_vertex = []  # row -> vertex_id
        self.vertex_attributes = pl.DataFrame(schema=self._VERTEX_SCHEMA)

        # Edge mappings (supports parallel edges)
        self.edge_definitions = {}  # edge_id -> (source, target)
        self.edge_weights = {}  # edge_id -> weight; absent means "no weight"
        self.edge_directed = {}  # edge_id -> bool

        self._next_vertex_id = 1
        self._next_edge_id = 0

    def __repr__(self):
        return (
            f"Network(vertices={self.number_of_vertices()}, "
            f"edges={self.number_of_edges()}, "
            f"directedness={self.directedness.name})"
        )

    # ID generation

    def _get_next_vertex_id(self, taken=()) -> str:
        while True:
            vertex_id = f"vertex_{self._next_vertex_id}"
            self._next_vertex_id += 1
            if vertex_id not in self.vertex_to_idx and vertex_id not in taken:
                return vertex_id

    def _get_next_edge_id(self, taken=()) -> str:
        """INTERNAL: Generate a unique edge ID for parallel edges.

        Parameters
        --
        taken : container of str, optional
            IDs reserved by the batch being inserted.

        Returns
        ---
        str
            Fresh ``edge_<n>`` identifier (monotonic counter).

        """
        while True:
            edge_id = f"edge_{self._next_edge_id}"
            self._next_edge_id += 1
            if edge_id not in self.edge_definitions and edge_id not in taken:
                return edge_id

    @staticmethod
    def _finite(value, what: str) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{what} must be a finite number, got {value!r}.")
        return value

    # Vertices

    def add_vertex(self, vertex_id=None, *, name: str = "", x: float = 0.0, y: float = 0.0) -> str:
        """Add a vertex.

        Parameters
        --
        vertex_id : str, optional
            Unique vertex ID. Generated as ``vertex_<n>`` when omitted.
        name : str
            Display name; may be empty and need not be unique.
        x, y : float
            Location of the vertex.

        Returns
        ---
        str
            The vertex ID.

        Raises
        --
        ValueError
            If ``vertex_id`` is already used.

        """
        return self.add_vertices_bulk([{"vertex_id": vertex_id, "name": name, "x": x, "y": y}])[0]

    def add_vertices_bulk(self, vertices: Iterable[dict]) -> list[str]:
        """Add many vertices with a single table append.

        Parameters
        --
        vertices : iterable of dict
            Each dict may carry ``vertex_id``, ``name``, ``x`` and ``y``; missing
            keys take the same defaults as :meth:`add_vertex`.

        Returns
        ---
        list[str]
            The vertex IDs, in input order.

        Raises
        --
        ValueError
            If an explicit ID is already used, or a coordinate is not finite.
            Nothing is added in that case.

        """
        items = list(vertices)

        # Explicit IDs first, so generated ones can avoid them.
        explicit = set()
        for item in items:
            vid = item.get("vertex_id")
            if vid is None:
                continue
            vid = str(vid)
            if vid in self.vertex_to_idx or vid in explicit:
                raise ValueError(f"Vertex '{vid}' already exists.")
            explicit.add(vid)

        rows = []
        for item in items:
            vid = item.get("vertex_id")
            name = item.get("name")
            rows.append(
                {
                    "vertex_id": None if vid is None else str(vid),
                    "name": "" if name is None else str(name),
                    "x": self._finite(item.get("x", 0.0) or 0.0, "x"),
                    "y": self._finite(item.get("y", 0.0) or 0.0, "y"),
                }
            )
        for row in rows:
            if row["vertex_id"] is None:
                row["vertex_id"] = self._get_next_vertex_id(explicit)

        if not rows:
            return []

        new_rows = pl.DataFrame(rows, schema=self._VERTEX_SCHEMA)
        self.vertex_attributes = pl.concat([self.vertex_attributes, new_rows], how="vertical")

        ids = []
        for row in rows:
            vid = row["vertex_id"]
            self.vertex_to_idx[vid] = len(self.idx_to_vertex)
            self.idx_to_vertex.append(vid)
            ids.append(vid)
        return ids

    def has_vertex(self, vertex_id) -> bool:
        return vertex_id in self.vertex_to_idx

    def vertices(self) -> list[str]:
        """Vertex IDs in creation order."""
        return list(self.idx_to_vertex)

    def number_of_vertices(self) -> int:
        return len(self.idx_to_vertex)

    def _vertex_row(self, vertex_id) -> int:
        try:
            return self.vertex_to_idx[vertex_id]
        except KeyError:
            raise KeyError(f"Vertex '{vertex_id}' not found.") from None

    def get_name(self, vertex_id) -> str:
        return self.vertex_attributes["name"][self._vertex_row(vertex_id)]

    def set_name(self, vertex_id, name: str) -> None:
        idx = self._vertex_row(vertex_id)
        self.vertex_attributes = self.vertex_attributes.with_columns(
            pl.when(pl.int_range(pl.len()) == idx)
            .then(pl.lit("" if name is None else str(name)))
            .otherwise(pl.col("name"))
            .alias("name")
        )

    def get_location(self, vertex_id) -> tuple[float, float]:
        idx = self._vertex_row(vertex_id)
        df = self.vertex_attributes
        return (df["x"][idx], df["y"][idx])

    def set_location(self, vertex_id, x: float, y: float) -> None:
        idx = self._vertex_row(vertex_id)
        x = self._finite(x, "x")
        y = self._finite(y, "y")
        hit = pl.int_range(pl.len()) == idx
        self.vertex_attributes = self.vertex_attributes.with_columns(
            pl.when(hit).then(pl.lit(x)).otherwise(pl.col("x")).alias("x"),
            pl.when(hit).then(pl.lit(y)).otherwise(pl.col("y")).alias("y"),
        )

    def vertex_locations(self) -> np.ndarray:
        """Return an ``(n, 2)`` float array of vertex locations in creation order."""
        if self.vertex_attributes.height == 0:
            return np.zeros((0, 2), dtype=float)
        return self.vertex_attributes.select(["x", "y"]).to_numpy().astype(float)

    # Edges

    def add_edge(self, source, target, *, edge_directed=None, weight=None, edge_id=None) -> str:
        """Add a binary edge between two existing vertices.

        Parameters
        --
        source, target : str
            Vertex IDs. Both must exist.
        edge_directed : bool, optional
            Per-edge directedness; defaults to the network's ``directed`` flag.
        weight : float, optional
            Edge weight. ``None`` leaves the edge unweighted.
        edge_id : str, optional
            Explicit edge ID. Generated as ``edge_<n>`` when omitted.

        Returns
        ---
        str
            The edge ID.

        Raises
        --
        KeyError
            If an endpoint is not a vertex of the network.
        ValueError
            If ``edge_id`` is already used.

        """
        return self.add_edges_bulk(
            [
                {
                    "source": source,
                    "target": target,
                    "edge_directed": edge_directed,
                    "weight": weight,
                    "edge_id": edge_id,
                }
            ]
        )[0]

    def add_edges_bulk(self, edges: Iterable[dict]) -> list[str]:
        """Add many edges.

        Parameters
        --
        edges : iterable of dict
            Keys: ``source``, ``target`` (required), ``edge_directed``,
            ``weight``, ``edge_id`` (optional).

        Returns
        ---
        list[str]
            The edge IDs, in input order.

        Raises
        --
        KeyError
            If an endpoint is not a vertex of the network.
        ValueError
            If an explicit ``edge_id`` is already used or a weight is not finite.
            Nothing is added in that case.

        """
        rows = []
        explicit = set()
        for item in edges:
            source = item["source"]
            target = item["target"]
            for v in (source, target):
                if v not in self.vertex_to_idx:
                    raise KeyError(f"Vertex '{v}' not found.")

            eid = item.get("edge_id")
            if eid is not None:
                if eid in self.edge_definitions or eid in explicit:
                    raise ValueError(f"Edge '{eid}' already exists.")
                explicit.add(eid)

            directed = item.get("edge_directed")
            if directed is None:
                directed = self.directed
            weight = item.get("weight")
            if weight is not None:
                weight = self._finite(weight, "Edge weight")
            rows.append((eid, source, target, bool(directed), weight))

        ids = []
        for eid, source, target, directed, weight in rows:
            if eid is None:
                eid = self._get_next_edge_id(explicit)
            self.edge_definitions[eid] = (source, target)
            self.edge_directed[eid] = directed
            if weight is not None:
                self.edge_weights[eid] = weight
            ids.append(eid)
        return ids

    def edges(self) -> list[str]:
        """Edge IDs in creation order."""
        return list(self.edge_definitions)

    def number_of_edges(self) -> int:
        return len(self.edge_definitions)

    def get_edge(self, edge_id) -> tuple[str, str]:
        try:
            return self.edge_definitions[edge_id]
        except KeyError:
            raise KeyError(f"Edge '{edge_id}' not found.") from None

    def is_directed_edge(self, edge_id) -> bool:
        self.get_edge(edge_id)
        return self.edge_directed[edge_id]

    def get_directed_edges(self) -> list[str]:
        return [eid for eid, d in self.edge_directed.items() if d]

    def get_undirected_edges(self) -> list[str]:
        return [eid for eid, d in self.edge_directed.items() if not d]

    def set_edge_weight(self, edge_id, weight: float) -> None:
        self.get_edge(edge_id)
        self.edge_weights[edge_id] = self._finite(weight, "Edge weight")

    def get_edge_weight(self, edge_id, default=None):
        """Return the weight of ``edge_id``, or ``default`` if it has none."""
        self.get_edge(edge_id)
        return self.edge_weights.get(edge_id, default)

    @property
    def directedness(self) -> Directedness:
        """Inferred directedness: mixed when both edge kinds are present."""
        has_directed = False
        has_undirected = False
        for d in self.edge_directed.values():
            if d:
                has_directed = True
            else:
                has_undirected = True
            if has_directed and has_undirected:
                return Directedness.MIXED
        if has_directed:
            return Directedness.DIRECTED
        return Directedness.UNDIRECTED
