from collections import deque


def open_cells(snapshot):
    return {(x, y) for y in range(snapshot.height) for x in range(snapshot.width) if snapshot.is_open(x, y)}


def flood_fill(snapshot, start):
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) in seen:
                continue
            if 0 <= nx < snapshot.width and 0 <= ny < snapshot.height and snapshot.is_open(nx, ny):
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen


def count_open_links(snapshot):
    """Number of orthogonally adjacent open/open pairs."""
    links = 0
    for x, y in open_cells(snapshot):
        if x + 1 < snapshot.width and snapshot.is_open(x + 1, y):
            links += 1
        if y + 1 < snapshot.height and snapshot.is_open(x, y + 1):
            links += 1
    return links


# RandomGenerator output for seed 42 on a 10x10 grid ('#' wall, '.' open)
SEED_42_RANDOM_10X10 = [
    "..#.....#.",
    "......#.##",
    "..###..#..",
    "#.###.#.#.",
    "##....#...",
    "####.##.#.",
    "...###.#..",
    ".###..#.##",
    "#.#..####.",
    ".#.....#.#",
]


def text_to_bytes(rows):
    return bytes(1 if c == "#" else 0 for row in rows for c in row)
