# tests/test_runner.py

"""Tests for the headless CLI commands."""

import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import patch

from src.cli import runner
from src.config.settings import Settings
from src.storage.cart_codec import product_to_record
from src.storage.catalog import DEFAULT_PRODUCTS
from src.storage.kv_store import MemoryStore


class _StdoutCase(unittest.TestCase):
    """Capture stdout for a command run."""

    def setUp(self) -> None:
        self.stdout = io.StringIO()
        for patcher in (
            patch("sys.stdout", self.stdout),
            patch.dict(os.environ, {"COLUMNS": "250"}),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)

    def json_output(self) -> Any:
        return json.loads(self.stdout.getvalue())


class TestListProducts(_StdoutCase):
    """runner.list_products."""

    def test_json_filtered_output(self) -> None:
        """JSON output lists only matching products."""
        code = runner.list_products("tea", "Tea", "json")
        self.assertEqual(code, 0)
        ids = [r["id"] for r in self.json_output()]
        self.assertEqual(ids, ["BT001", "BG001", "BH001"])

    def test_no_results_is_success(self) -> None:
        """No matches still exits 0 with empty stdout."""
        code = runner.list_products("nothing-here", "All", "json")
        self.assertEqual(code, 0)
        self.assertEqual(self.stdout.getvalue(), "")

    def test_table_output(self) -> None:
        """Table output shows only the chosen category."""
        code = runner.list_products("", "Coffee", "table")
        self.assertEqual(code, 0)
        out = self.stdout.getvalue()
        self.assertIn("BC001", out)
        self.assertIn("BS001", out)
        self.assertNotIn("BT001", out)

    def test_uses_configured_catalog_file(self) -> None:
        """CATALOG_PATH replaces the built-in catalog."""
        path = Path(tempfile.mkdtemp()) / "catalog.json"
        path.write_text(
            json.dumps([product_to_record(DEFAULT_PRODUCTS[1])]),
            encoding="utf-8",
        )
        with patch.object(Settings, "CATALOG_PATH", path):
            runner.list_products("", "All", "json")
        self.assertEqual([r["id"] for r in self.json_output()], ["BC001"])


class TestBrokenCatalogFile(_StdoutCase):
    """A broken CATALOG_PATH is reported on stderr with exit code 1."""

    def setUp(self) -> None:
        super().setUp()
        self.stderr = io.StringIO()
        patcher = patch("sys.stderr", self.stderr)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.store = MemoryStore()

    def _run_all(self, path: Path) -> None:
        with patch.object(Settings, "CATALOG_PATH", path):
            with self.assertLogs("catalog_cart.cli", level="ERROR"):
                self.assertEqual(runner.list_products("", "All", "json"), 1)
            with self.assertLogs("catalog_cart.cli", level="ERROR"):
                self.assertEqual(runner.list_categories(), 1)
            with self.assertLogs("catalog_cart.cli", level="ERROR"):
                self.assertEqual(
                    runner.add_product("BT001", None, self.store), 1
                )
        self.assertEqual(self.stdout.getvalue(), "")
        self.assertIn("Cannot load catalog", self.stderr.getvalue())
        self.assertIsNone(self.store.get("cart"))

    def test_missing_file(self) -> None:
        """A catalog path that does not exist fails cleanly."""
        self._run_all(Path(tempfile.mkdtemp()) / "absent.json")

    def test_invalid_json(self) -> None:
        """A catalog file that is not JSON fails cleanly."""
        path = Path(tempfile.mkdtemp()) / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        self._run_all(path)

    def test_bad_record(self) -> None:
        """A record with a wrong field type fails cleanly."""
        record = product_to_record(DEFAULT_PRODUCTS[0])
        record["inStock"] = "false"
        path = Path(tempfile.mkdtemp()) / "catalog.json"
        path.write_text(json.dumps([record]), encoding="utf-8")
        self._run_all(path)


class TestListCategories(_StdoutCase):
    """runner.list_categories."""

    def test_prints_category_universe(self) -> None:
        """Categories print one per line."""
        self.assertEqual(runner.list_categories(), 0)
        self.assertEqual(
            self.stdout.getvalue().splitlines(), ["All", "Tea", "Coffee"]
        )


class TestAddAndShowCart(_StdoutCase):
    """runner.add_product and runner.show_cart."""

    def setUp(self) -> None:
        super().setUp()
        self.store = MemoryStore()

    def test_add_default_quantity(self) -> None:
        """add uses the minimum order quantity."""
        self.assertEqual(runner.add_product("BT001", None, self.store), 0)
        self.assertEqual(runner.show_cart("json", self.store), 0)
        data = self.json_output()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["quantity"], 12)

    def test_add_twice_merges(self) -> None:
        """Two adds of one product merge into one line."""
        runner.add_product("BG001", 5, self.store)
        runner.add_product("BG001", 7, self.store)
        runner.show_cart("json", self.store)
        data = self.json_output()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["quantity"], 12)

    def test_unknown_product(self) -> None:
        """An unknown id exits 1 without writing."""
        self.assertEqual(runner.add_product("NOPE", None, self.store), 1)
        self.assertIsNone(self.store.get("cart"))

    def test_out_of_stock_product(self) -> None:
        """An out-of-stock product exits 1 without writing."""
        self.assertEqual(runner.add_product("BH001", None, self.store), 1)
        self.assertIsNone(self.store.get("cart"))

    def test_empty_cart(self) -> None:
        """An empty cart prints nothing to stdout."""
        self.assertEqual(runner.show_cart("json", self.store), 0)
        self.assertEqual(self.stdout.getvalue(), "")

    def test_cart_table(self) -> None:
        """Table output names the cart products."""
        runner.add_product("BC001", None, self.store)
        runner.show_cart("table", self.store)
        self.assertIn("Birlanu Instant Coffee", self.stdout.getvalue())

    def test_default_store_is_settings_file(self) -> None:
        """Without an injected store the configured JSON file is used."""
        runner.add_product("BM001", None)
        self.assertTrue(Settings.STORE_PATH.exists())
        runner.show_cart("json")
        self.assertEqual(self.json_output()[0]["id"], "BM001")


if __name__ == "__main__":
    unittest.main()
