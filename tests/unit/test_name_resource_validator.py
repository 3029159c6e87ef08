import io
import json
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from dungeon.infrastructure.name_resource_validator import main, validate_name_file


class NameResourceValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def _write(self, filename: str, payload) -> Path:
        path = self.root / filename
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def _run(self, *argv: str) -> tuple[int, str]:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main(list(argv))
        return code, buffer.getvalue()

    def test_validate_name_file_reports_missing_path(self) -> None:
        audit = validate_name_file(self.root / "does_not_exist.json")
        self.assertTrue(audit.errors)
        self.assertIn("File not found", audit.errors[0])

    def test_validate_name_file_reports_invalid_json(self) -> None:
        path = self.root / "broken.json"
        path.write_text("{", encoding="utf-8")
        audit = validate_name_file(path)
        self.assertIn("Invalid JSON", audit.errors[0])

    def test_validate_name_file_reports_non_utf8_file(self) -> None:
        path = self.root / "latin1.json"
        path.write_bytes(b'{"cat": {"singular": "\xff"}}')
        audit = validate_name_file(path)
        self.assertEqual(1, len(audit.errors))
        self.assertIn("Unreadable file", audit.errors[0])

    def test_main_fails_cleanly_on_directory_path(self) -> None:
        code, output = self._run(str(self.root))
        self.assertEqual(1, code)
        self.assertIn("Unreadable file", output)

    def test_main_accepts_clean_file(self) -> None:
        path = self._write("items.json", {"sword": {"singular": "Sword"}})
        code, output = self._run(str(path))
        self.assertEqual(0, code)
        self.assertIn("names valid", output)

    def test_main_prints_warnings_but_passes_by_default(self) -> None:
        path = self._write("creatures.json", {"cat": {"singular": "Cat", "plural": "Cats"}})
        with mock.patch.dict("os.environ", {"DUNGEON_NAMES_STRICT": "0"}):
            code, output = self._run(str(path))
        self.assertEqual(0, code)
        self.assertIn("- cat: Unnecessary JSON property: Cats can be rendered from Cat.", output)

    def test_main_fails_on_warnings_when_strict(self) -> None:
        path = self._write("creatures.json", {"cat": {"singular": "Cat", "plural": "Cats"}})
        code, _ = self._run(str(path), "--strict")
        self.assertEqual(1, code)

    def test_strict_can_come_from_environment(self) -> None:
        path = self._write("creatures.json", {"cat": {"singular": "Cat", "plural": "Cats"}})
        with mock.patch.dict("os.environ", {"DUNGEON_NAMES_STRICT": "yes"}):
            code, _ = self._run(str(path))
        self.assertEqual(1, code)

    def test_main_fails_on_errors(self) -> None:
        good = self._write("good.json", {"rat": {"singular": "Rat"}})
        bad = self._write("bad.json", {"ghost": {"plural": "Ghosts"}})
        code, output = self._run(str(good), str(bad))
        self.assertEqual(1, code)
        self.assertIn("invalid (1 errors)", output)
        self.assertIn("- ghost: Missing required field 'singular'", output)


if __name__ == "__main__":
    unittest.main()
