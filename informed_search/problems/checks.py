from __future__ import annotations
from collections import deque
from ..core.engine import successor_entries, unpack_entry
from ..core.errors import MalformedDomain
from ..core.problem import State


def sanity_check_domain(start: State, max_states: int = 10_000) -> str:
    """Walks states breadth-first and checks every successor entry honours the State/Action contract."""
    seen = set()
    q = deque([start])
    while q and len(seen) < max_states:
        s = q.popleft()
        try:
            if s in seen:
                continue
        except TypeError as e:
            raise MalformedDomain(f"state {s!r} is not hashable") from e
        if hash(s) != hash(s) or not s == s:
            raise MalformedDomain(f"state {s!r} has unstable equality/hash")
        seen.add(s)
        for entry in successor_entries(s):
            a, s2 = unpack_entry(entry, s)
            if a.cost < 0:
                raise MalformedDomain(f"action {a!r} from {s!r} has negative cost {a.cost}")
            q.append(s2)
    return f"OK: visited {len(seen)} states; successor entries well-formed."
