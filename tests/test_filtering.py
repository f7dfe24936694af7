"""Tests for table selection."""

import pytest

from pg_schema_view.database.models import IntrospectionResult, RawTable
from pg_schema_view.schema import filter_tables, normalize


@pytest.fixture
def two_schema_catalog():
    return normalize(IntrospectionResult(tables=[
        RawTable("public", "users", "table"),
        RawTable("public", "orders", "table"),
        RawTable("public", "Audit_Log", "table"),
        RawTable("billing", "users", "table"),
        RawTable("billing", "invoices", "table"),
    ]))


class TestFilterTables:
    """Test include and exclude lists."""

    def test_no_filters_returns_catalog(self, two_schema_catalog):
        """Test that nothing is removed without filters."""
        assert filter_tables(two_schema_catalog) is two_schema_catalog
        assert filter_tables(two_schema_catalog, include=[], exclude=[]) is two_schema_catalog

    def test_include_bare_name_matches_every_schema(self, two_schema_catalog):
        """Test a bare name selects the table in all schemas."""
        result = filter_tables(two_schema_catalog, include=["users"])

        assert [t.qualified_name for t in result.tables] == ["billing.users", "public.users"]

    def test_include_qualified_name(self, two_schema_catalog):
        """Test a qualified name selects a single table."""
        result = filter_tables(two_schema_catalog, include=["billing.users", "orders"])

        assert [t.qualified_name for t in result.tables] == ["billing.users", "public.orders"]

    def test_exclude_is_case_insensitive(self, two_schema_catalog):
        """Test exclusion ignores case."""
        result = filter_tables(two_schema_catalog, exclude=["audit_log", "INVOICES"])

        assert "Audit_Log" not in [t.name for t in result.tables]
        assert "invoices" not in [t.name for t in result.tables]
        assert len(result.tables) == 3

    def test_exclude_wins_over_include(self, two_schema_catalog):
        """Test a table both included and excluded is removed."""
        result = filter_tables(two_schema_catalog, include=["users", "orders"], exclude=["users"])

        assert [t.qualified_name for t in result.tables] == ["public.orders"]

    def test_schemas_kept(self, two_schema_catalog):
        """Test the schema list is unchanged after filtering."""
        result = filter_tables(two_schema_catalog, include=["orders"])

        assert result.schemas == ["billing", "public"]
        assert result.tables_in("billing") == []

    def test_input_not_modified(self, two_schema_catalog):
        """Test filtering returns a new catalog."""
        filter_tables(two_schema_catalog, exclude=["users"])

        assert len(two_schema_catalog.tables) == 5
