"""Tests for import, category, account and budget commands."""

import json

from bookkeep.cli.main import cli
from bookkeep.domain.category import DEFAULT_CATEGORIES, category_slug


def test_import_successful(cli_runner, temp_db, fixtures_dir):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", str(fixtures_dir / "sample_records.json")],
    )

    assert result.exit_code == 0
    assert "Import complete" in result.output
    assert "Imported: 17 records" in result.output
    assert "transactions: 4" in result.output
    assert "Skipped: 0 duplicates" in result.output


def test_import_reports_duplicates_and_errors(cli_runner, temp_db, tmp_path):
    path = tmp_path / "records.json"
    path.write_text(
        json.dumps(
            {
                "transactions": [
                    {"id": "t1", "date": "2025-01-01", "amount": 10, "type": "income"},
                    {"id": "t1", "date": "2025-01-01", "amount": 10, "type": "income"},
                    {"id": "t2", "amount": -5, "type": "expense"},
                ]
            }
        ),
        encoding="utf-8",
    )

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "import", str(path)])

    assert result.exit_code == 0
    assert "Imported: 1 records" in result.output
    assert "Skipped: 1 duplicates" in result.output
    assert "Errors: 1" in result.output
    assert "Invalid record 2 in 'transactions'" in result.output


def test_import_unreadable_file(cli_runner, temp_db, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[1, 2", encoding="utf-8")

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "import", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_import_missing_file(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", "does-not-exist.json"]
    )

    assert result.exit_code != 0


def test_init_categories(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "init-categories"])

    assert result.exit_code == 0
    assert f"Successfully created {len(DEFAULT_CATEGORIES)} categories." in result.output
    categories = temp_db.list_categories()
    assert {cat.name for cat in categories} == {name for name, _, _ in DEFAULT_CATEGORIES}
    assert temp_db.get_category("expense-servicios-publicos").color == "#795548"


def test_init_categories_twice(cli_runner, temp_db):
    cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "init-categories"])
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "init-categories"])

    assert result.exit_code == 0
    assert "Categories already exist" in result.output


def test_category_slug():
    assert category_slug("Servicios Públicos", "expense") == "expense-servicios-publicos"
    assert category_slug("  Ventas ", "income") == "income-ventas"


def test_category_create_and_list(cli_runner, temp_db):
    create = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "create", "Consultoría", "--type", "income"],
    )
    listing = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "list", "--type", "income"]
    )

    assert create.exit_code == 0
    assert "Created category 'Consultoría'" in create.output
    assert listing.exit_code == 0
    assert "Consultoría" in listing.output


def test_category_create_duplicate(cli_runner, temp_db):
    args = ["--db-path", temp_db.database_path, "category", "create", "Ventas", "--type", "income"]
    cli_runner.invoke(cli, args)
    result = cli_runner.invoke(cli, args)

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_category_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "category", "list"])

    assert result.exit_code == 0
    assert "No categories found" in result.output


def test_account_list(cli_runner, imported_db):
    result = cli_runner.invoke(cli, ["--db-path", imported_db.database_path, "account", "list"])

    assert result.exit_code == 0
    assert "Cuenta Corriente" in result.output
    assert "$15,000.00 COP" in result.output
    assert "-$2,500.00" in result.output


def test_budget_list(cli_runner, imported_db):
    result = cli_runner.invoke(cli, ["--db-path", imported_db.database_path, "budget", "list"])

    assert result.exit_code == 0
    assert "Primer trimestre" in result.output
    assert "2025-01-01 to 2025-03-31" in result.output
    assert "$13,600.00" in result.output


def test_log_level_option(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--log-level", "debug", "account", "list"]
    )

    assert result.exit_code == 0
    assert "No accounts found" in result.output


def test_help_does_not_need_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "report" in result.output
    assert "dashboard" in result.output
