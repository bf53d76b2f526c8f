"""Reachability questions over a directed graph read from text.

The input holds a vertex count, then that many one-character vertex names.
An arc count follows, then arcs written as ``<a,b>``. For the command, a
query count and queries written as ``[a,b]`` come after the graph.
"""

from __future__ import annotations

import argparse
import re
import sys

from algoshelf.graph import AdjacencyMatrix

_COUNT = re.compile(r"\s*([+-]?\d+)\s*")
_ARC = re.compile(r"\s*<(.),(.)>", re.DOTALL)
_QUERY = re.compile(r"\s*\[(.),(.)\]", re.DOTALL)


def _read_count(text: str, pos: int, what: str) -> tuple[int, int]:
    match = _COUNT.match(text, pos)
    if match is None:
        raise ValueError(f"expected {what} at offset {pos}")
    count = int(match.group(1))
    if count < 0:
        raise ValueError(f"{what} must not be negative, got {count}")
    return count, match.end()


def _read_pairs(
    text: str, pos: int, count: int, pattern: re.Pattern, what: str
) -> tuple[list[tuple[str, str]], int]:
    pairs = []
    for number in range(1, count + 1):
        match = pattern.match(text, pos)
        if match is None:
            raise ValueError(f"malformed {what} #{number} at offset {pos}")
        pairs.append((match.group(1), match.group(2)))
        pos = match.end()
    return pairs, pos


def _parse_graph_at(text: str, pos: int = 0) -> tuple[AdjacencyMatrix, int]:
    vertex_count, pos = _read_count(text, pos, "vertex count")
    names = text[pos:pos + vertex_count]
    if len(names) < vertex_count:
        raise ValueError(f"expected {vertex_count} vertex names, got {len(names)}")
    pos += vertex_count
    graph = AdjacencyMatrix(names)
    arc_count, pos = _read_count(text, pos, "arc count")
    arcs, pos = _read_pairs(text, pos, arc_count, _ARC, "arc")
    for src, dst in arcs:
        try:
            graph.add_arc(src, dst)
        except KeyError as exc:
            raise ValueError(f"arc <{src},{dst}> names {exc.args[0]}") from None
    return graph, pos


def parse_graph(text):
    """Build an AdjacencyMatrix from text holding exactly one graph.

    Raises ValueError when the text is malformed, names an unknown vertex in
    an arc, or continues past the last arc.
    """
    graph, end = _parse_graph_at(text)
    if text[end:].strip():
        raise ValueError(f"unexpected text after the graph at offset {end}")
    return graph


def answer_queries(graph, queries):
    """Answer each ``(src, dst)`` pair with a ``From src to dst: YES.`` or ``NO.`` line.

    Raises KeyError if a query names a vertex the graph does not hold.
    """
    return [
        f"From {src} to {dst}: {'YES' if graph.has_path(src, dst) else 'NO'}."
        for src, dst in queries
    ]


def main(argv=None) -> int:
    """Read a graph and path queries from stdin and print one answer per query."""
    parser = argparse.ArgumentParser(
        description="Answer path queries over a directed graph read from stdin."
    )
    parser.parse_args(argv)
    data = sys.stdin.read()
    try:
        graph, pos = _parse_graph_at(data)
        query_count, pos = _read_count(data, pos, "query count")
        queries, _ = _read_pairs(data, pos, query_count, _QUERY, "query")
        lines = answer_queries(graph, queries)
    except (ValueError, KeyError) as exc:
        print(exc.args[0] if exc.args else exc, file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())