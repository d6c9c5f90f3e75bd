"""Adjacency for rectangular and hexagonal boards.

Rectangular locations are (x, y). Hexagonal locations are (layer, position):
layer 0 is the single center cell and layer l > 0 is a ring of 6*l cells,
numbered in angular order. Position 0 of every ring lies on the same axis, so
ring l has a "corner" every l positions and each of its six sides holds l
cells.
"""

Location = tuple[int, int]


def rect_neighbors(w: int, h: int, x: int, y: int) -> list[Location]:
    """The Moore neighborhood of (x, y), clipped to a w x h board."""
    n = []
    for dx in range(-1, 2):
        nx = x + dx
        if nx < 0 or nx >= w:
            continue
        for dy in range(-1, 2):
            ny = y + dy
            if ny < 0 or ny >= h:
                continue
            if dx == 0 and dy == 0:
                continue
            n.append((nx, ny))
    return n


def init_neighbors(w: int, h: int) -> dict[Location, list[Location]]:
    return {(x, y): rect_neighbors(w, h, x, y) for y in range(h) for x in range(w)}


def positions_in_layer(layer: int) -> int:
    return 1 if layer == 0 else 6 * layer


def on_corner(loc: Location) -> bool:
    layer, p = loc
    return p % layer == 0


def hex_neighbors(loc: Location) -> list[Location]:
    """Neighboring (layer, position) pairs of a hex cell.

    Positions are not reduced modulo the ring size and layers are not
    clipped to any board; HexBoard does both.
    """
    layer, p = loc
    if layer == 0:
        return [(1, q) for q in range(6)]

    # nearest positions on the next ring out and the next ring in
    r_out = (layer + 1) * p // layer
    r_in = (layer - 1) * p // layer
    if on_corner(loc):
        exterior = [(layer + 1, q) for q in (r_out - 1, r_out, r_out + 1)]
        interior = [(layer - 1, r_in)]
    else:
        exterior = [(layer + 1, q) for q in (r_out, r_out + 1)]
        interior = [(layer - 1, q) for q in (r_in, r_in + 1)]
    in_layer = [(layer, p - 1), (layer, p + 1)]
    return exterior + in_layer + interior
