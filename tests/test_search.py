import pytest

from teamdesk.core.enums import ApprovalStatus, next_status
from teamdesk.services.search import filter_teams, matches_search, search_filter

ALPHA = {"teamName": "Alpha", "manager": "Bob", "director": "Dana", "members": [{"name": "Eve"}]}
BETA = {"teamName": "Beta", "manager": "Carl", "director": "Dora", "members": [{"name": "Finn"}]}


@pytest.mark.parametrize("query", ["eve", "EVE", "bob", "alp", "dan"])
def test_matches_any_field(query):
    assert matches_search(ALPHA, query)


def test_no_match():
    assert not matches_search(ALPHA, "zzz")
    assert filter_teams([ALPHA, BETA], "zzz") == []


def test_blank_query_keeps_everything():
    assert filter_teams([ALPHA, BETA], "   ") == [ALPHA, BETA]
    assert search_filter("  ") == {}
    assert search_filter(None) == {}


def test_missing_fields_do_not_break_matching():
    assert not matches_search({"teamName": "Solo"}, "bob")
    assert matches_search({"teamName": "Solo", "members": [{"name": None}, {"name": "Bob"}]}, "bob")


def test_mongo_filter_escapes_pattern():
    f = search_filter("a.b")
    patterns = {clause_value["$regex"] for clause in f["$or"] for clause_value in clause.values()}
    assert patterns == {r"a\.b"}
    assert len(f["$or"]) == 4


@pytest.mark.parametrize("start", list(ApprovalStatus))
def test_next_status_cycles_in_three_steps(start):
    assert next_status(next_status(next_status(start))) == start


def test_next_status_sequence():
    assert next_status("pending") == ApprovalStatus.approved
    assert next_status("approved") == ApprovalStatus.not_approved
    assert next_status("not-approved") == ApprovalStatus.pending
