# 📄 File: tests/test_migrations.py
# 🧭 Purpose (Layman Explanation):
# Makes sure the database upgrade scripts build exactly the tables, columns, indexes
# and value checks the application code expects, and can take them down again.
# 🧪 Purpose (Technical Summary):
# Renders the Alembic revisions as offline PostgreSQL SQL and compares the emitted
# CREATE TABLE / CREATE INDEX / CHECK statements against DatabaseBase.metadata.
# 🔗 Dependencies:
# - pytest, alembic (offline MigrationContext), SQLAlchemy postgresql dialect
# 🔄 Connected Modules / Calls From:
# - migrations/versions, marketplace.modules.load_all_models

import importlib.util
import io
import re
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CheckConstraint, CreateIndex

from marketplace.modules import load_all_models
from marketplace.shared.infrastructure.database.base import DatabaseBase

VERSIONS_DIR = Path(__file__).resolve().parents[1] / "migrations" / "versions"
REVISIONS = ("001_initial_schema", "002_consultations")

DIALECT = postgresql.dialect()
PREPARER = DIALECT.identifier_preparer


def load_revision(name: str):
    module_spec = importlib.util.spec_from_file_location(f"revision_{name}", VERSIONS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def render(step: str, revisions) -> str:
    """Run upgrade/downgrade of the given revisions in offline mode and return the SQL."""
    buffer = io.StringIO()
    context = MigrationContext.configure(
        dialect_name="postgresql",
        opts={"as_sql": True, "output_buffer": buffer},
    )
    with Operations.context(context):
        for revision in revisions:
            getattr(revision, step)()
    return buffer.getvalue()


def table_block(sql: str, table_name: str) -> str:
    start = sql.index(f"CREATE TABLE {PREPARER.quote(table_name)} (")
    return sql[start:sql.index("\n)", start)]


@pytest.fixture(scope="module")
def revisions():
    return [load_revision(name) for name in REVISIONS]


@pytest.fixture(scope="module")
def upgrade_sql(revisions) -> str:
    load_all_models()
    return render("upgrade", revisions)


# ============================================================================
# UPGRADE
# ============================================================================

def test_revisions_form_a_chain(revisions):
    initial, consultations = revisions
    assert initial.down_revision is None
    assert consultations.down_revision == initial.revision


def test_every_table_is_created(upgrade_sql):
    created = set(re.findall(r"CREATE TABLE (\S+) \(", upgrade_sql))
    expected = {PREPARER.quote(name) for name in DatabaseBase.metadata.tables}
    assert created == expected


def test_columns_match_models(upgrade_sql):
    missing = []
    for table in DatabaseBase.metadata.sorted_tables:
        block = table_block(upgrade_sql, table.name)
        for column in table.columns:
            if f"\t{PREPARER.quote(column.name)} " not in block:
                missing.append(f"{table.name}.{column.name}")
        extra = len(re.findall(r"^\t[\"\w]", block, flags=re.MULTILINE))
        constraint_lines = len(re.findall(r"^\tCONSTRAINT ", block, flags=re.MULTILINE))
        assert extra - constraint_lines == len(table.columns), table.name
    assert missing == []


def test_indexes_match_models(upgrade_sql):
    missing = []
    for table in DatabaseBase.metadata.sorted_tables:
        for index in table.indexes:
            statement = str(CreateIndex(index).compile(dialect=DIALECT)).split(" ON ")[0]
            if statement not in upgrade_sql:
                missing.append(statement)
    assert missing == []


def test_check_constraints_match_models(upgrade_sql):
    missing = []
    for table in DatabaseBase.metadata.sorted_tables:
        for constraint in table.constraints:
            if not isinstance(constraint, CheckConstraint) or constraint.name is None:
                continue
            name = PREPARER.format_constraint(constraint)
            if f"CONSTRAINT {name} CHECK" not in upgrade_sql:
                missing.append(name)
    assert missing == []


def test_cyclic_references_added_after_tables(upgrade_sql):
    invoices = upgrade_sql.index(f"CREATE TABLE {PREPARER.quote('invoices')} (")
    constraint = upgrade_sql.index("ADD CONSTRAINT fk_orders_invoice_id_invoices")
    assert constraint > invoices


# ============================================================================
# DOWNGRADE
# ============================================================================

def test_downgrade_drops_every_table(revisions):
    load_all_models()
    sql = render("downgrade", list(reversed(revisions)))

    dropped = set(re.findall(r"DROP TABLE (\S+);", sql))
    assert dropped == {PREPARER.quote(name) for name in DatabaseBase.metadata.tables}
    assert sql.index("DROP TABLE appointments") < sql.index("DROP TABLE users")
