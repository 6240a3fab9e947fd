from datetime import datetime

import pytest

from kuekit.paginate import (
    DataPagingResponse,
    Datapaging,
    new_paging,
    no_pagination,
    prepare_pagination,
)


def test_no_pagination_is_nil():
    assert no_pagination().is_nil() is True


def test_new_paging_is_not_nil():
    paging = new_paging(10, 1, ["id", "asc"])
    assert paging.is_nil() is False
    assert paging.limit == 10
    assert paging.page == 1
    assert paging.order_by == ["id", "asc"]


def test_first_page_has_zero_offset():
    assert new_paging(25, 1, []).get_offset() == 0


@pytest.mark.parametrize("limit,page", [(10, 2), (7, 5), (3, 9)])
def test_offset_matches_build_query(limit, page):
    paging = new_paging(limit, page, [])
    query = paging.build_query("SELECT 1")
    assert query.endswith(f" OFFSET {paging.get_offset()}")
    assert f" LIMIT {limit}" in query


def test_build_query_order_by_joins_entries():
    paging = Datapaging(order_by=["name asc", "id desc"])
    assert paging.build_query("SELECT * FROM t") == "SELECT * FROM t ORDER BY name asc, id desc"


def test_build_query_without_settings_is_unchanged():
    assert no_pagination().build_query("SELECT * FROM t") == "SELECT * FROM t"


def test_between_returns_copy():
    original = Datapaging()
    start = datetime(2024, 1, 1)
    end = datetime(2024, 1, 31)
    ranged = original.between(start, end)
    assert ranged.date_earliest == start
    assert ranged.date_latest == end
    assert original.date_earliest is None
    assert original.with_date_between() is False


def test_date_between_depends_on_timestamp_flag():
    start = datetime(2024, 1, 1)
    end = datetime(2024, 1, 31)
    unix = Datapaging().between(start, end)
    assert unix.with_date_between() is True
    assert unix.with_date_time_between() is False
    stamped = Datapaging(date_in_timestamp=True).between(start, end)
    assert stamped.with_date_between() is False
    assert stamped.with_date_time_between() is True


def test_order_by_multi_flag():
    assert Datapaging(order_by_multi=["a asc"]).with_order_by_multi() is True
    assert Datapaging().with_order_by_multi() is False


@pytest.mark.parametrize("total,limit", [(25, 10), (30, 10), (1, 10), (0, 5), (99, 7)])
def test_set_page_size_covers_all_records(total, limit):
    response = DataPagingResponse(limit=limit, total_record_count=total).set_page_size()
    assert response.page_size * limit >= total
    assert max(response.page_size - 1, 0) * limit <= total
    if total:
        assert (response.page_size - 1) * limit < total


def test_set_page_size_zero_limit_leaves_page_size():
    response = DataPagingResponse(page_size=4, limit=0, total_record_count=50)
    assert response.set_page_size().page_size == 4


def test_response_to_dict_keys():
    response = DataPagingResponse(page_number=1, page_size=2, limit=10, total_record_count=15, records=[1])
    assert response.to_dict() == {
        "page_number": 1,
        "page_size": 2,
        "limit": 10,
        "total_record_count": 15,
        "records": [1],
    }


def test_prepare_pagination_defaults():
    paging = prepare_pagination({}, ["name"])
    assert paging.limit == 10
    assert paging.page == 1
    assert paging.order_by == ["id", "asc"]
    assert paging.filter_value == ""


def test_prepare_pagination_allowed_values():
    params = {"sort_by": "name", "sort_direction": "desc", "page": "4", "limit": "25", "search": "kue"}
    paging = prepare_pagination(params, ["name"])
    assert paging.order_by == ["name", "desc"]
    assert paging.page == 4
    assert paging.limit == 25
    assert paging.filter_value == "kue"


def test_prepare_pagination_rejects_unknown_sort():
    params = {"sort_by": "price", "sort_direction": "sideways"}
    assert prepare_pagination(params, ["name"]).order_by == ["id", "asc"]


@pytest.mark.parametrize("limit", ["abc", "-5", "0", ""])
def test_prepare_pagination_bad_limit_falls_back(limit):
    assert prepare_pagination({"limit": limit}, []).limit == 10


@pytest.mark.parametrize("page", ["0", "-3", "abc"])
def test_prepare_pagination_bad_page_is_first(page):
    assert prepare_pagination({"page": page}, []).page == 1