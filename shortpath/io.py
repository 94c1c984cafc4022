"""Graph input helpers."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import GraphFormatError
from .graph import Edge, Graph, Label, Weight

ParsedGraph = Tuple[List[Label], List[Edge]]


def _parse_weight(raw: str, lineno: int) -> Weight:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        raise GraphFormatError(f"line {lineno}: invalid weight {raw!r}") from None
    if not math.isfinite(value):
        raise GraphFormatError(f"line {lineno}: invalid weight {raw!r}")
    return value


def _read_csv(path: Path) -> ParsedGraph:
    """Read an edge list with one ``u,v,w`` row per line.

    A row with a single column declares an isolated vertex. Columns may be
    separated by commas or tabs; empty lines and lines starting with ``#``
    are skipped.

    Args:
        path: The path to the CSV file.

    Returns:
        Vertex labels declared on their own and the list of edges.

    Raises:
        GraphFormatError: If a row has two or more than three columns, or an
            invalid weight.
    """
    vertices: List[Label] = []
    edges: List[Edge] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = [p.strip() for p in row.replace("\t", ",").split(",")]
            if len(parts) == 1:
                vertices.append(parts[0])
            elif len(parts) == 3:
                edges.append((parts[0], parts[1], _parse_weight(parts[2], lineno)))
            else:
                raise GraphFormatError(f"line {lineno}: expected 'u,v,w' or a single label")
    return vertices, edges


def _read_jsonl(path: Path) -> ParsedGraph:
    """Read a JSON Lines file of ``{"u", "v", "w"}`` or ``{"vertex"}`` objects."""
    vertices: List[Label] = []
    edges: List[Edge] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
            except json.JSONDecodeError as exc:
                raise GraphFormatError(f"line {lineno}: {exc.msg}") from exc
            if not isinstance(obj, dict):
                raise GraphFormatError(f"line {lineno}: expected a JSON object")
            if "vertex" in obj:
                vertices.append(str(obj["vertex"]))
                continue
            try:
                u, v, w = str(obj["u"]), str(obj["v"]), obj["w"]
            except KeyError as exc:
                raise GraphFormatError(f"line {lineno}: missing key {exc}") from exc
            edges.append((u, v, w))
    return vertices, edges


_FMT_READERS: Dict[str, Callable[[Path], ParsedGraph]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
}


def _detect_format(path: Path) -> Optional[str]:
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    return None


def read_graph(path: str, fmt: Optional[str] = None) -> Graph:
    """Read a graph from an edge-list file.

    Args:
        path: The path to the graph file.
        fmt: ``"csv"`` or ``"jsonl"``. If None, the format is detected from
            the file extension.

    Returns:
        The graph built from the file, vertices in order of first appearance.

    Raises:
        GraphFormatError: If the format is unknown, a line is malformed, or
            the file declares no vertices.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError("unknown graph format")
    vertices, edges = _FMT_READERS[fmt](p)
    if not vertices and not edges:
        raise GraphFormatError("no vertices parsed from file")
    return Graph.from_edges(edges, vertices=vertices)


__all__ = ["read_graph"]
