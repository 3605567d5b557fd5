"""Tests for the SQL query builder."""

from collections import deque

import pytest
from pydantic import ValidationError

from sqlpager.errors import InvalidPageSizeError, InvalidSourceError
from sqlpager.pagination.cursor import encode_cursor
from sqlpager.pagination.pager import PageInfo, Pager
from sqlpager.query.sql import SqlQuery


class TestSqlQueryBuild:
    """Test SqlQuery.build normalization and validation."""

    def test_defaults(self):
        query = SqlQuery.build(source="users")

        assert query.source == "users"
        assert query.projection == []
        assert query.filter is None
        assert query.order is None
        assert query.cursor is None
        assert query.page_size == 10

    @pytest.mark.parametrize("page_size", [1, 2, 50, 98, 99])
    def test_valid_page_sizes_kept(self, page_size):
        query = SqlQuery.build(source="users", page_size=page_size)

        assert query.page_size == page_size

    def test_all_fields_kept(self):
        query = SqlQuery.build(
            source="users",
            projection=["id", "name"],
            filter="id > 10",
            order="id DESC",
            cursor="MTA",
            page_size=20
        )

        assert query == SqlQuery(
            source="users",
            projection=["id", "name"],
            filter="id > 10",
            order="id DESC",
            cursor="MTA",
            page_size=20
        )

    @pytest.mark.parametrize("page_size", [100, 101, 1000, 2 ** 64 - 1])
    def test_oversized_page_size_reported_as_maximum(self, page_size):
        """Oversized requests are clamped to 100, which is itself rejected."""
        with pytest.raises(InvalidPageSizeError) as exc_info:
            SqlQuery.build(source="users", page_size=page_size)

        assert exc_info.value.size == 100
        assert str(exc_info.value) == "Page size must be between 1-99. Got: 100"

    @pytest.mark.parametrize("page_size", [0, 1, 99])
    def test_empty_source_rejected(self, page_size):
        with pytest.raises(InvalidSourceError, match="Source cannot be empty"):
            SqlQuery.build(source="", page_size=page_size)

    def test_page_size_checked_before_source(self):
        with pytest.raises(InvalidPageSizeError):
            SqlQuery.build(source="", page_size=500)

    def test_custom_settings(self, test_settings):
        assert SqlQuery.build(source="users", settings=test_settings).page_size == 25
        assert SqlQuery.build(source="users", page_size=49, settings=test_settings).page_size == 49

        with pytest.raises(InvalidPageSizeError) as exc_info:
            SqlQuery.build(source="users", page_size=60, settings=test_settings)
        assert exc_info.value.size == 50

    def test_query_is_immutable(self):
        query = SqlQuery.build(source="users")

        with pytest.raises(ValidationError):
            query.page_size = 20

    def test_json_round_trip(self):
        query = SqlQuery.build(source="users", projection=["id"], cursor="MTA", page_size=5)

        assert SqlQuery.model_validate_json(query.model_dump_json()) == query


class TestSqlQueryToSql:
    """Test SQL rendering."""

    def test_first_page_sql(self):
        query = SqlQuery.build(source="users", page_size=10)

        assert query.to_sql() == "SELECT * FROM users LIMIT 11 OFFSET 0"

    def test_full_query_sql(self):
        query = SqlQuery(
            source="users",
            projection=["id", "name"],
            filter="id > 10",
            order="id DESC",
            cursor=encode_cursor(10),
            page_size=10
        )

        assert query.to_sql() == (
            "SELECT id, name FROM users WHERE id > 10 ORDER BY id DESC LIMIT 12 OFFSET 10"
        )

    def test_filter_without_order(self):
        query = SqlQuery.build(source="orders", filter="status = 'open'", page_size=5)

        assert query.to_sql() == "SELECT * FROM orders WHERE status = 'open' LIMIT 6 OFFSET 0"

    def test_order_without_filter(self):
        query = SqlQuery.build(source="orders", order="created_at", page_size=5)

        assert query.to_sql() == "SELECT * FROM orders ORDER BY created_at LIMIT 6 OFFSET 0"

    def test_zero_cursor_still_widens_limit(self):
        query = SqlQuery.build(source="users", cursor=encode_cursor(0), page_size=10)

        assert query.to_sql() == "SELECT * FROM users LIMIT 12 OFFSET 0"

    def test_undecodable_cursor_falls_back_to_first_offset(self):
        query = SqlQuery.build(source="users", cursor="not a cursor!", page_size=10)

        assert query.get_cursor() is None
        assert query.to_sql() == "SELECT * FROM users LIMIT 12 OFFSET 0"

    def test_forged_cursor_passed_through(self):
        query = SqlQuery.build(source="users", cursor=encode_cursor(10 ** 9), page_size=10)

        assert query.to_sql() == "SELECT * FROM users LIMIT 12 OFFSET 1000000000"


class TestSqlQueryPaging:
    """Test pager computation and next page queries."""

    def test_first_page_pager_and_next_query(self, generate_test_ids):
        query = SqlQuery.build(source="users")

        data = generate_test_ids(1, 11)
        pager = query.get_pager(data)
        assert pager.prev is None
        assert pager.next == 10
        assert len(data) == 10

        next_query = query.next_page(pager)
        assert next_query is not None
        assert next_query.to_sql() == "SELECT * FROM users LIMIT 12 OFFSET 10"

    def test_next_query_keeps_shape(self):
        query = SqlQuery.build(
            source="users",
            projection=["id", "name"],
            filter="active",
            order="id",
            page_size=3
        )

        next_query = query.next_page(query.get_pager([1, 2, 3, 4]))

        assert next_query.source == "users"
        assert next_query.projection == ["id", "name"]
        assert next_query.filter == "active"
        assert next_query.order == "id"
        assert next_query.page_size == 3
        assert next_query.cursor == encode_cursor(3)
        assert query.cursor is None

    def test_zero_cursor_has_no_prev(self):
        query = SqlQuery.build(source="users", cursor=encode_cursor(0), page_size=10)

        pager = query.get_pager(deque(range(12)))

        assert pager.prev is None
        assert pager.next == 10

    def test_last_page_has_no_next_query(self):
        query = SqlQuery.build(source="users", cursor=encode_cursor(20), page_size=10)

        pager = query.get_pager(list(range(10)))

        assert pager == Pager(prev=10, next=None)
        assert query.next_page(pager) is None

    def test_page_info(self):
        query = SqlQuery.build(source="users", cursor=encode_cursor(40), page_size=20)

        assert query.page_info() == PageInfo(cursor=40, page_size=20)

    def test_undecodable_cursor_pages_from_start(self):
        query = SqlQuery.build(source="users", cursor="%%%", page_size=10)

        pager = query.get_pager(list(range(11)))

        assert pager.prev is None
        assert query.next_page(pager).cursor == encode_cursor(10)

    def test_no_prev_page_on_query(self):
        assert not hasattr(SqlQuery, "prev_page")
