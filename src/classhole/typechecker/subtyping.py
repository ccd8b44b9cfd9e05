"""Nominal is-a relation derived from single-inheritance edges."""


class SubtypeRelation:
    def __init__(self):
        self._parent: dict[str, str] = {}

    def add_subtype(self, sub: str, sup: str):
        """Record that ``sub`` extends ``sup``."""
        self._parent[sub] = sup

    def superclass_of(self, name: str) -> str | None:
        return self._parent.get(name)

    def is_subtype(self, sub: str, sup: str) -> bool:
        """Reflexive, transitive walk up the superclass chain of ``sub``."""
        if sub == sup:
            return True
        seen = {sub}
        current = self._parent.get(sub)
        while current is not None and current not in seen:
            if current == sup:
                return True
            seen.add(current)
            current = self._parent.get(current)
        return False
