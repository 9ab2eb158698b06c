"""Sample inputs and assertion helpers shared by the test modules."""

MIXED_NET = (
    "/* This is a comment. */\r\n"
    "\r\n"
    "*vertices 10\r\n"
    '1 "Vertex 1" 0.1 0.2 0.3 ignored parameters\r\n'
    '2 "Vertex 2" 0.2 0.2 0.3\r\n'
    '3 "Vertex 3" 0.3 0.2 0.3\r\n'
    '4 "Vertex 4" 0.4 0.2 0.3\r\n'
    "   /* This is a comment. */\r\n"
    '5 "Vertex 5" 0.5 0.2 0.3\r\n'
    '6 "Vertex 6" 0.6 0.2 0.3\r\n'
    '7 "Vertex 7" 0.7 0.2 0.3\r\n'
    '8 "Vertex 8" 0.8 0.2 0.3\r\n'
    '9 "Vertex 9" 0.9 0.2 0.3\r\n'
    '10 "Vertex 10" 0.10 0.2 0.3\r\n'
    "\r\n"
    "*edges\r\n"
    "1 2 3.1 ignored parameters\r\n"
    "   /* This is a comment. */\r\n"
    "3 4 4.2\r\n"
    "9 8 1.2\r\n"
    "\r\n"
    "*edgeslist\r\n"
    "1 4 5\r\n"
    "   /* This is a comment. */\r\n"
    "6 8 3 2\r\n"
    "\r\n"
    "*arcs\r\n"
    "10 9 123.34 ignored parameters\r\n"
    "9 1 98.7\r\n"
    "\r\n"
    "*arcslist\r\n"
    "   /* This is a comment. */\r\n"
    "4 2 5\r\n"
    "8 7 1 2\r\n"
    "\r\n"
    "/* This is a comment. */\r\n"
)

# (first, second, directed, weight) for every edge of MIXED_NET, in file order
MIXED_NET_EDGES = [
    (1, 2, False, 3.1),
    (3, 4, False, 4.2),
    (9, 8, False, 1.2),
    (1, 4, False, 1.0),
    (1, 5, False, 1.0),
    (6, 8, False, 1.0),
    (6, 3, False, 1.0),
    (6, 2, False, 1.0),
    (10, 9, True, 123.34),
    (9, 1, True, 98.7),
    (4, 2, True, 1.0),
    (4, 5, True, 1.0),
    (8, 7, True, 1.0),
    (8, 1, True, 1.0),
    (8, 2, True, 1.0),
]


def edge_tuples(G):
    """``(first, second, directed, weight)`` per edge, vertices by ordinal."""
    ordinal = {vid: i + 1 for i, vid in enumerate(G.vertices())}
    out = []
    for eid in G.edges():
        s, t = G.get_edge(eid)
        out.append((ordinal[s], ordinal[t], G.is_directed_edge(eid), G.get_edge_weight(eid)))
    return out


def assert_networks_equal(G1, G2):
    """Assert two networks carry the same vertices and edges, in order."""
    assert G1.number_of_vertices() == G2.number_of_vertices(), "Vertex counts differ"
    names1 = G1.vertex_attributes.get_column("name").to_list()
    names2 = G2.vertex_attributes.get_column("name").to_list()
    assert names1 == names2, f"Vertex names differ: {names1} != {names2}"

    e1 = edge_tuples(G1)
    e2 = edge_tuples(G2)
    assert len(e1) == len(e2), "Edge counts differ"
    for a, b in zip(e1, e2):
        assert a[:3] == b[:3], f"Edge differs: {a} != {b}"
        assert abs((a[3] or 1.0) - (b[3] or 1.0)) < 1e-9, f"Edge weight differs: {a} != {b}"
