from tracelink.params import build_list_params
from tracelink.schemas import ListOptions


def test_empty_options_produce_no_order_key():
    assert build_list_params({}) == {}
    assert build_list_params() == {}
    assert build_list_params(ListOptions()) == {}


def test_sort_sequence_joined_in_priority_order():
    assert build_list_params({"sort": ["a", "b"]}) == {"order": {"sort": "a,b"}}
    assert build_list_params({"sort": ("deadline_date", "name", "order_id")}) == {
        "order": {"sort": "deadline_date,name,order_id"}
    }


def test_sort_string_passes_through():
    assert build_list_params({"sort": "name"}) == {"order": {"sort": "name"}}


def test_reverse_only_sent_when_true():
    assert build_list_params({"reverse": False}) == {}
    assert build_list_params({"reverse": True}) == {"order": {"reverse": 1}}


def test_zero_page_and_limit_are_kept():
    params = build_list_params({"page": 0, "limit": 0})
    assert params["order"]["page"] == 0
    assert params["order"]["limit"] == 0


def test_filter_forwarded_untouched():
    params = build_list_params({"filter": {"locked": "=0"}, "filter_or": True})
    assert params["order"]["filter"]["locked"] == "=0"
    assert params["order"]["filter_or"] is True


def test_filter_expressions_are_not_interpreted():
    expressions = {
        "name": "pump",
        "state": "~closed",
        "order_id": "IN(1040,1041)",
        "dept_id": "!IN(3)",
        "deadline_date": "B2024-01-01,2024-12-31",
        "number": [">=1000", "<2000"],
    }
    params = build_list_params(ListOptions(filter=expressions))
    assert params == {"order": {"filter": expressions}}


def test_empty_filter_and_false_filter_or_omitted():
    assert build_list_params({"filter": {}, "filter_or": False, "sort": ""}) == {}


def test_full_options():
    params = build_list_params(
        {"sort": ["name"], "reverse": True, "limit": 50, "page": 2, "filter": {"locked": "=0"}}
    )
    assert params == {
        "order": {"sort": "name", "reverse": 1, "limit": 50, "page": 2, "filter": {"locked": "=0"}}
    }
