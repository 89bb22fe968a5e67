"""Tests for the command line interface."""

import json
import pytest
from pathlib import Path
import tempfile

from cli import main, parse_args

DOC = "import: b.yaml\n---\nref: *shared\n"


@pytest.fixture
def project():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir).resolve()
        (root / "a.yaml").write_text(DOC, encoding="utf-8")
        (root / "b.yaml").write_text("shared: &shared value\n", encoding="utf-8")
        yield root


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test default option values."""
        parsed = parse_args(["a.yaml", "--offset", "3"])

        assert parsed.file == "a.yaml"
        assert parsed.offset == 3
        assert parsed.format == "text"
        assert not parsed.no_modifier
        assert not parsed.declaration

    def test_verbose_and_quiet_exclusive(self):
        """Test that -v and -q cannot be combined."""
        with pytest.raises(SystemExit):
            parse_args(["a.yaml", "-v", "-q"])


class TestMain:
    """Tests for the main entry point."""

    def test_anchor_target(self, project, capsys):
        """Test resolving an alias to file:line:column."""
        offset = DOC.index("*shared") + 1

        code = main([str(project / "a.yaml"), "--offset", str(offset)])

        assert code == 0
        assert capsys.readouterr().out.strip() == f"{project / 'b.yaml'}:1:9"

    def test_line_and_column(self, project, capsys):
        """Test giving the click as a zero-based line and column."""
        code = main([str(project / "a.yaml"), "--line", "2", "--column", "6", "-f", "json"])

        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["path"] == str(project / "b.yaml")
        assert data["line"] == 0
        assert data["column"] == 8
        assert data["anchor"] == "shared"

    def test_import_target(self, project, capsys):
        """Test resolving the import path under the cursor."""
        offset = DOC.index("b.yaml") + 1

        code = main([str(project / "a.yaml"), "--offset", str(offset)])

        assert code == 0
        assert capsys.readouterr().out.strip() == str(project / "b.yaml")

    def test_no_modifier(self, project, capsys):
        """Test that a plain click finds nothing."""
        offset = DOC.index("*shared") + 1

        code = main([str(project / "a.yaml"), "--offset", str(offset), "--no-modifier"])

        assert code == 2
        assert capsys.readouterr().out == ""

    def test_no_target_json(self, project, capsys):
        """Test that misses carry a reason in JSON output."""
        (project / "b.yaml").unlink()
        offset = DOC.index("*shared") + 1

        code = main([str(project / "a.yaml"), "--offset", str(offset), "-f", "json"])

        data = json.loads(capsys.readouterr().out)
        assert code == 2
        assert data["found"] is False
        assert data["reason"] == "Anchor 'shared' not found in any import"

    def test_declaration(self, project, capsys):
        """Test printing the enclosing key/value pair."""
        offset = DOC.index("*shared") + 1

        code = main([str(project / "a.yaml"), "--offset", str(offset), "--declaration"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "ref: *shared [19, 31)"

    def test_declaration_json(self, project, capsys):
        """Test printing the enclosing key/value pair as JSON."""
        offset = DOC.index("b.yaml")

        code = main([str(project / "a.yaml"), "--offset", str(offset), "--declaration", "-f", "json"])

        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data == {"key": "import", "value": "b.yaml", "start": 0, "end": 14}

    def test_missing_file(self, project, capsys):
        """Test that an unreadable document is an error."""
        code = main([str(project / "missing.yaml"), "--offset", "0"])

        assert code == 1
        assert "Error reading" in capsys.readouterr().err

    def test_missing_position(self, project, capsys):
        """Test that a click position is required."""
        code = main([str(project / "a.yaml")])

        assert code == 1
        assert "--offset or --line" in capsys.readouterr().err
