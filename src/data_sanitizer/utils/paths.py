from __future__ import annotations
from collections.abc import Mapping, Sequence
from typing import Any, Iterator, List, Optional, Tuple

__all__ = ["WILDCARD", "split_path", "has_path", "get_path", "set_path", "expand_wildcards"]

WILDCARD = "*"

_MISSING = object()


# ----------------------------- helpers ---------------------------------

def _is_sequence(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes, bytearray))


def _index(seq: Sequence, seg: str) -> Optional[int]:
    """Segment -> list index, or None when it does not address an element."""
    # ASCII 0-9 only
    if not (seg.isascii() and seg.isdecimal()):
        return None
    i = int(seg)
    return i if i < len(seq) else None


def _step(node: Any, seg: str) -> Any:
    if isinstance(node, Mapping):
        return node[seg] if seg in node else _MISSING
    if _is_sequence(node):
        i = _index(node, seg)
        return node[i] if i is not None else _MISSING
    return _MISSING


def _children(node: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(node, Mapping):
        for k, v in node.items():
            yield str(k), v
    elif _is_sequence(node):
        for i, v in enumerate(node):
            yield str(i), v


def _lookup(data: Any, path: str) -> Any:
    # a literal top-level key wins over dotted traversal
    if isinstance(data, Mapping) and path in data:
        return data[path]
    cur = data
    for seg in split_path(path):
        cur = _step(cur, seg)
        if cur is _MISSING:
            return _MISSING
    return cur


# ----------------------------- public API ---------------------------------

def split_path(path: str) -> List[str]:
    return str(path).split(".")


def has_path(data: Any, path: str) -> bool:
    """True when `path` addresses an existing entry (a stored None counts)."""
    return _lookup(data, path) is not _MISSING


def get_path(data: Any, path: str, default: Any = None) -> Any:
    val = _lookup(data, path)
    return default if val is _MISSING else val


def set_path(data: Any, path: str, value: Any) -> Any:
    """
    Return a copy of `data` with `value` stored at `path`.

    Every container along the path is shallow-copied, so neither `data` nor
    any container nested inside it is mutated. Untouched branches are shared
    with the input.
    """
    if isinstance(data, Mapping) and path in data:
        out = dict(data)
        out[path] = value
        return out
    return _assoc(data, split_path(path), value)


def _assoc(node: Any, segs: List[str], value: Any) -> Any:
    head, rest = segs[0], segs[1:]

    if _is_sequence(node):
        i = _index(node, head)
        if i is None:
            raise IndexError(f"Cannot address {head!r} in a sequence of length {len(node)}")
        items = list(node)
        items[i] = _assoc(node[i], rest, value) if rest else value
        return tuple(items) if isinstance(node, tuple) else items

    # scalars in the way are replaced by a fresh mapping
    out = dict(node) if isinstance(node, Mapping) else {}
    if rest:
        out[head] = _assoc(out.get(head), rest, value)
    else:
        out[head] = value
    return out


def expand_wildcards(path: str, data: Any) -> List[str]:
    """
    Resolve every `*` segment of `path` against `data`.

    `*` matches each key of a mapping or each index of a sequence. Only
    concrete paths that exist in `data` are returned, in data order.
    """
    found: List[Tuple[List[str], Any]] = [([], data)]
    for seg in split_path(path):
        nxt: List[Tuple[List[str], Any]] = []
        for prefix, node in found:
            if seg == WILDCARD:
                for key, child in _children(node):
                    nxt.append((prefix + [key], child))
            else:
                child = _step(node, seg)
                if child is not _MISSING:
                    nxt.append((prefix + [seg], child))
        found = nxt
        if not found:
            break
    return [".".join(p) for p, _ in found]
