import asyncio
import math
from datetime import date

import pytest

from academy_api.app.core.db import CONTAINS, EQ, Ordering
from academy_api.app.core.errors import BadRequest
from academy_api.app.schemas.player import PlayerRead
from academy_api.app.services.pagination import (
    compact,
    contains,
    equals,
    fetch_all,
    fetch_page,
    page_range,
    total_pages,
)
from academy_api.app.schemas.schedule import ScheduleRead


NAMES = ["Andi", "Juan", "Budi", "Rizky", "Dimas", "Fajar", "Hana", "Iwan", "Joko", "Kevin", "Lutfi", "Made"]


@pytest.fixture
def players(store):
    for name in NAMES:
        store.seed("pemain", nama=name, posisi="Gelandang", tanggal_lahir="2011-05-05", minutes_play=0)
    return store


def _page(store, **kwargs):
    return asyncio.run(fetch_page(store, "pemain", PlayerRead, **kwargs))


def test_page_range_is_zero_based_and_inclusive():
    assert page_range(1, 10) == (0, 9)
    assert page_range(3, 5) == (10, 14)
    assert page_range(2, 1) == (1, 1)


@pytest.mark.parametrize("page, page_size", [(1, 0), (1, -5), (0, 10), (-1, 10)])
def test_page_range_rejects_non_positive_values(page, page_size):
    with pytest.raises(BadRequest) as excinfo:
        page_range(page, page_size)
    assert excinfo.value.status_code == 400


def test_total_pages_rounds_up():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2


def test_empty_filter_values_are_dropped():
    assert contains("nama", None) is None
    assert contains("nama", "   ") is None
    assert equals("tanggal_lahir", "") is None
    assert compact([contains("nama", ""), equals("lisensi", "AFC C")]) == [equals("lisensi", "AFC C")]


def test_filter_helpers_build_predicates():
    assert contains("nama", " an ").op == CONTAINS
    assert contains("nama", " an ").value == "an"
    flt = equals("tanggal_lahir", date(2010, 1, 1))
    assert flt.op == EQ
    assert flt.value == "2010-01-01"


@pytest.mark.parametrize("page_size", [1, 3, 5, 10, 25])
def test_page_size_bounds_data_and_total_pages(players, page_size):
    envelope = _page(players, page=1, page_size=page_size)
    assert envelope.success is True
    assert len(envelope.data) <= page_size
    assert envelope.totalData == len(NAMES)
    assert envelope.totalPages == math.ceil(len(NAMES) / page_size)
    assert envelope.pageSize == page_size
    assert envelope.currentPage == 1


def test_page_beyond_last_is_empty_with_unchanged_totals(players):
    unpaged = _page(players, page=1, page_size=100)
    envelope = _page(players, page=9, page_size=5)
    assert envelope.data == []
    assert envelope.totalData == unpaged.totalData
    assert envelope.totalPages == 3
    assert envelope.currentPage == 9


def test_default_ordering_is_newest_first(players):
    envelope = _page(players, page=1, page_size=3)
    assert [p.nama for p in envelope.data] == ["Made", "Lutfi", "Kevin"]


def test_name_filter_is_case_insensitive_substring(players):
    envelope = _page(players, filters=[contains("nama", "an")], page=1, page_size=10)
    names = {p.nama for p in envelope.data}
    assert {"Andi", "Juan", "Hana", "Iwan"} <= names
    assert "Budi" not in names
    assert envelope.totalData == len(names)


def test_filters_combine_with_and(store):
    store.seed("pemain", nama="Andi", tanggal_lahir="2010-01-01")
    store.seed("pemain", nama="Andika", tanggal_lahir="2012-03-03")
    store.seed("pemain", nama="Budi", tanggal_lahir="2010-01-01")
    envelope = _page(
        store,
        filters=[contains("nama", "AND"), equals("tanggal_lahir", date(2010, 1, 1))],
        page=1,
        page_size=10,
    )
    assert [p.nama for p in envelope.data] == ["Andi"]
    assert envelope.totalData == 1


def test_query_sends_single_ranged_select(players):
    _page(players, filters=[contains("nama", "a")], page=2, page_size=4)
    (call,) = players.calls
    kind, table, filters, ordering, row_range = call
    assert (kind, table) == ("select", "pemain")
    assert row_range == (4, 7)
    assert ordering == Ordering("created_at", descending=True)
    assert filters == [contains("nama", "a")]


def test_invalid_page_size_never_queries_store(players):
    with pytest.raises(BadRequest):
        _page(players, page=1, page_size=0)
    assert players.calls == []


def test_fetch_all_wraps_everything_in_one_page(store):
    store.seed("jadwal", lawan="A", tanggal="2025-09-01", lokasi="X")
    store.seed("jadwal", lawan="B", tanggal="2025-08-01", lokasi="Y")
    envelope = asyncio.run(fetch_all(store, "jadwal", ScheduleRead, ordering=Ordering("tanggal")))
    assert envelope.totalData == 2
    assert envelope.pageSize == 2
    assert envelope.totalPages == 1
    assert [e.lawan for e in envelope.data] == ["B", "A"]


def test_fetch_all_empty(store):
    envelope = asyncio.run(fetch_all(store, "jadwal", ScheduleRead))
    assert envelope.data == []
    assert envelope.totalPages == 0
