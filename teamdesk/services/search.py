"""
Team search rule, shared by the list endpoint and the client view-model.

A team matches when the query occurs, ignoring case, in its teamName, manager,
director or in the name of any member. A blank query matches everything.
"""
import re
from typing import Any, Dict, Iterable, List, Optional

SEARCH_FIELDS = ("teamName", "manager", "director")


def search_filter(term: Optional[str]) -> Dict[str, Any]:
    """Mongo filter for the search rule."""
    if not term or not term.strip():
        return {}

    pattern = re.escape(term)
    return {
        "$or": [
            *({f: {"$regex": pattern, "$options": "i"}} for f in SEARCH_FIELDS),
            {"members.name": {"$regex": pattern, "$options": "i"}},
        ]
    }


def matches_search(team: Dict[str, Any], query: str) -> bool:
    if not query.strip():
        return True

    q = query.lower()
    if any(q in (team.get(f) or "").lower() for f in SEARCH_FIELDS):
        return True
    return any(q in (m.get("name") or "").lower() for m in team.get("members") or [])


def filter_teams(teams: Iterable[Dict[str, Any]], query: str) -> List[Dict[str, Any]]:
    return [t for t in teams if matches_search(t, query)]
