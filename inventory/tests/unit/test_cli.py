"""Unit tests for the inventory command-line interface."""

import pytest

from inventory.cli import build_parser, main
from inventory.models.domain import ItemKind
from inventory.services.warehouse_service import WarehouseService


def run(data_dir, *args):
    return main(["--no-log", "--data-dir", str(data_dir), *args])


class TestCli:

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_parser_rejects_unknown_kind(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["list", "--kind", "furniture"])

    def test_seed_then_list(self, tmp_path, capsys):
        assert run(tmp_path, "seed", "--kind", "groceries") == 0
        assert (tmp_path / "groceries.json").exists()

        assert run(tmp_path, "list", "--kind", "groceries") == 0

        output = capsys.readouterr().out
        assert "Inventory of Groceries:" in output
        assert "Name: Milk" in output

    def test_restock_persists(self, tmp_path):
        run(tmp_path, "seed", "--kind", "groceries")

        assert run(tmp_path, "restock", "101", "50", "--kind", "groceries") == 0

        service = WarehouseService.from_config(data_dir=tmp_path)
        service.load(ItemKind.GROCERIES)
        assert service.repository(ItemKind.GROCERIES).get_by_id(101).quantity == 150

    def test_remove_and_show_missing(self, tmp_path, capsys):
        run(tmp_path, "seed")

        assert run(tmp_path, "remove", "3") == 0
        assert run(tmp_path, "show", "3") == 1

        assert "[not_found]" in capsys.readouterr().err

    def test_set_quantity_negative_fails(self, tmp_path, capsys):
        run(tmp_path, "seed")

        assert run(tmp_path, "set-quantity", "2", "-5") == 1

        assert "[invalid_value]" in capsys.readouterr().err

    def test_corrupt_snapshot_reported(self, tmp_path, capsys):
        (tmp_path / "electronics.json").write_text("{broken", encoding="utf-8")

        assert run(tmp_path, "list") == 1

        assert "[format_error]" in capsys.readouterr().err

    def test_demo(self, tmp_path, capsys):
        assert run(tmp_path, "demo") == 0

        output = capsys.readouterr().out
        assert "already exists" in output
        assert "ID 999 not found" in output
        assert "Quantity -5 is invalid" in output
        assert "increased stock for item ID 101 by 50 units" in output
        assert "Name: Keyboard" in output
        assert (tmp_path / "inventory_log.json").exists()

    def test_main_with_log_capture(self, tmp_path, isolated_dirs):
        assert main(["--data-dir", str(tmp_path), "list"]) == 0

        assert list(isolated_dirs["log_dir"].glob("*.log"))

    def test_default_data_dir_follows_env_config(self, isolated_dirs):
        assert main(["--no-log", "seed", "--kind", "stock"]) == 0

        assert (isolated_dirs["data_dir"] / "stock.json").exists()
