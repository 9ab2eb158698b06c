from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install pajeknet[networkx]"
    ) from e

import warnings

from ..core.graph import Directedness, Network


def to_nx(graph: Network):
    """Export a :class:`Network` to a NetworkX multigraph.

    Parameters
    --
    graph : Network

    Returns
    ---
    networkx.MultiGraph | networkx.MultiDiGraph
        ``MultiGraph`` for undirected networks, ``MultiDiGraph`` otherwise.
        Nodes are vertex IDs carrying ``name``, ``x`` and ``y``; edges are keyed
        by edge ID and carry ``directed`` plus ``weight`` when one is set.

    Notes
    -
    A mixed network has no faithful NetworkX counterpart: its undirected edges
    are exported once, in source-to-target orientation, flagged
    ``directed=False``, and a ``UserWarning`` is issued.

    """
    directedness = graph.directedness
    G = nx.MultiGraph() if directedness is Directedness.UNDIRECTED else nx.MultiDiGraph()

    df = graph.vertex_attributes
    for vid, name, x, y in zip(
        df.get_column("vertex_id").to_list(),
        df.get_column("name").to_list(),
        df.get_column("x").to_list(),
        df.get_column("y").to_list(),
    ):
        G.add_node(vid, name=name, x=x, y=y)

    for eid in graph.edges():
        source, target = graph.get_edge(eid)
        payload = {"directed": graph.is_directed_edge(eid)}
        weight = graph.get_edge_weight(eid)
        if weight is not None:
            payload["weight"] = weight
        G.add_edge(source, target, key=eid, **payload)

    if directedness is Directedness.MIXED:
        warnings.warn(
            "Network-NX conversion is lossy: "
            f"{len(graph.get_undirected_edges())} undirected edge(s) exported as "
            "single arcs with directed=False.",
            UserWarning,
            stacklevel=2,
        )
    return G


def _node_location(attrs: dict) -> tuple[float, float]:
    if "x" in attrs or "y" in attrs:
        return float(attrs.get("x") or 0.0), float(attrs.get("y") or 0.0)
    pos = attrs.get("pos")
    if pos is not None and len(pos) >= 2:
        return float(pos[0]), float(pos[1])
    return 0.0, 0.0


def from_nx(nxG) -> Network:
    """Import a NetworkX graph into a :class:`Network`.

    Parameters
    --
    nxG : networkx.Graph
        Any NetworkX graph class. Multigraph keys become edge IDs when they are
        strings and unique.

    Returns
    ---
    Network
        Vertex IDs are ``str(node)`` in node order. ``name`` defaults to the
        node itself; location comes from ``x``/``y`` or a ``pos`` pair. Edge
        ``weight`` is kept; per-edge ``directed`` defaults to
        ``nxG.is_directed()``.

    """
    H = Network(directed=nxG.is_directed())

    vertex_rows = []
    for node, attrs in nxG.nodes(data=True):
        x, y = _node_location(attrs)
        vertex_rows.append(
            {"vertex_id": str(node), "name": attrs.get("name", str(node)), "x": x, "y": y}
        )
    H.add_vertices_bulk(vertex_rows)

    if nxG.is_multigraph():
        edge_iter = ((u, v, k, d) for u, v, k, d in nxG.edges(keys=True, data=True))
    else:
        edge_iter = ((u, v, None, d) for u, v, d in nxG.edges(data=True))

    rows = []
    used_ids = set()
    for u, v, key, data in edge_iter:
        edge_id = None
        if isinstance(key, str) and key not in used_ids:
            edge_id = key
            used_ids.add(key)
        rows.append(
            {
                "source": str(u),
                "target": str(v),
                "weight": data.get("weight"),
                "edge_directed": data.get("directed", nxG.is_directed()),
                "edge_id": edge_id,
            }
        )
    H.add_edges_bulk(rows)
    return H
