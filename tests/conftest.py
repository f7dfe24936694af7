"""Shared pytest fixtures for pg-schema-view tests."""

import pytest

from pg_schema_view.database.models import (
    IntrospectionResult,
    RawColumn,
    RawForeignKey,
    RawIndex,
    RawPrimaryKey,
    RawTable,
    RawUniqueConstraint,
)
from pg_schema_view.schema import normalize


@pytest.fixture
def shop_rows():
    """Catalog rows for a users/orders database in the public schema."""
    return IntrospectionResult(
        tables=[
            RawTable(schema="public", name="users", kind="table"),
            RawTable(schema="public", name="orders", kind="table"),
        ],
        columns=[
            RawColumn("public", "users", "id", "integer", "NO", "nextval('users_id_seq'::regclass)", 1),
            RawColumn("public", "users", "email", "character varying", "NO", None, 2),
            RawColumn("public", "users", "created_at", "timestamp without time zone", "YES", "now()", 3),
            RawColumn("public", "orders", "id", "integer", "NO", None, 1),
            RawColumn("public", "orders", "user_id", "integer", "NO", None, 2),
            RawColumn("public", "orders", "total", "numeric", "YES", None, 3),
        ],
        primary_keys=[
            RawPrimaryKey("public", "users", "users_pkey", "id", 1),
            RawPrimaryKey("public", "orders", "orders_pkey", "id", 1),
        ],
        unique_constraints=[
            RawUniqueConstraint("public", "users", "users_email_key", "email", 1),
        ],
        foreign_keys=[
            RawForeignKey(
                "public", "orders", "fk_orders_user", "user_id", 1,
                "public", "users", "id", on_update="NO ACTION", on_delete="CASCADE",
            ),
        ],
        indexes=[
            RawIndex("public", "orders", "idx_orders_user_id", "user_id", 1, False, "btree"),
        ],
    )


@pytest.fixture
def shop_catalog(shop_rows):
    """The users/orders rows normalized with constraints and indexes."""
    return normalize(shop_rows, include_indexes=True, include_constraints=True)


@pytest.fixture
def empty_view_rows():
    """A single view that reports no columns."""
    return IntrospectionResult(
        tables=[RawTable(schema="public", name="empty_view", kind="view")],
    )
