"""Tests for tsdecl CLI."""
import json
import pytest
from pathlib import Path
import tempfile
from typer.testing import CliRunner
from tsdecl.cli import app
from tsdecl.config import ENV_BASEDIR, ENV_SCOPE_REGISTRY


runner = CliRunner()

LIST_OF_STRINGS = {
    "kind": "list",
    "name": "java.util.List<java.lang.String>",
    "simple_name": "List",
    "type_arguments": [{"kind": "string", "name": "java.lang.String", "simple_name": "String"}],
}

VERTX = {"kind": "api", "name": "io.vertx.core.Vertx", "simple_name": "Vertx", "module_name": "vertx-core"}


class TestTranslateCommand:
    """Tests for the translate command."""

    def test_translate_single(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "type.json"
            path.write_text(json.dumps(LIST_OF_STRINGS))

            result = runner.invoke(app, ["translate", str(path)])

            assert result.exit_code == 0
            assert result.stdout.strip() == "string[]"

    def test_translate_session(self) -> None:
        """Test that --session reports import status per reference."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "types.json"
            path.write_text(json.dumps([VERTX, LIST_OF_STRINGS, VERTX]))

            result = runner.invoke(app, ["translate", str(path), "--session"])

            assert result.exit_code == 0
            assert result.stdout.splitlines() == [
                "Vertx\timport",
                "string[]\tvisible",
                "Vertx\tvisible",
            ]

    def test_invalid_descriptor(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.json"
            path.write_text('{"kind": "nope"}')

            result = runner.invoke(app, ["translate", str(path)])

            assert result.exit_code == 1

    @pytest.mark.parametrize("type_arguments", [[], [LIST_OF_STRINGS["type_arguments"][0]]])
    def test_map_with_wrong_argument_count(self, type_arguments) -> None:
        """Test that a map without both key and value types is rejected cleanly."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "map.json"
            path.write_text(json.dumps({
                "kind": "map",
                "name": "java.util.Map<java.lang.String>",
                "simple_name": "Map",
                "type_arguments": type_arguments,
            }))

            result = runner.invoke(app, ["translate", str(path)])

            assert result.exit_code == 1
            assert not isinstance(result.exception, IndexError)

    def test_missing_file(self) -> None:
        result = runner.invoke(app, ["translate", "does-not-exist.json"])
        assert result.exit_code == 1


class TestEscapeCommand:
    """Tests for the escape command."""

    def test_escape(self) -> None:
        result = runner.invoke(app, ["escape", "class", "fooBar"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["__class", "fooBar"]


class TestScopeCommand:
    """Tests for the scope command."""

    def test_scope_from_env(self) -> None:
        registry = json.dumps([{"group": "io.vertx", "scope": "vertx", "prefix": "vertx-", "stripPrefix": True}])
        result = runner.invoke(app, ["scope", "vertx-core", "io.vertx"], env={ENV_SCOPE_REGISTRY: registry})

        assert result.exit_code == 0
        assert result.stdout.strip() == "@vertx/core"

    def test_malformed_registry(self) -> None:
        result = runner.invoke(app, ["scope", "vertx-core", "io.vertx"], env={ENV_SCOPE_REGISTRY: "[{"})
        assert result.exit_code == 1


class TestOverrideCommand:
    """Tests for the override command."""

    def test_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "io.vertx.core.Vertx.override.json").write_text(
                json.dumps({"close": {"args": "()", "return": "Promise<void>"}})
            )
            result = runner.invoke(app, ["override", "io.vertx.core.Vertx", "close"], env={ENV_BASEDIR: tmpdir})

            assert result.exit_code == 0
            assert "args: ()" in result.stdout
            assert "return: Promise<void>" in result.stdout

    def test_no_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(app, ["override", "io.vertx.core.Vertx", "close", "--dir", tmpdir])

            assert result.exit_code == 0
            assert "No override." in result.stdout

    def test_malformed_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "io.vertx.core.Vertx.override.json").write_text("{broken")
            result = runner.invoke(app, ["override", "io.vertx.core.Vertx", "close", "--dir", tmpdir])

            assert result.exit_code == 1


class TestCLIHelp:
    """Tests for CLI help output."""

    def test_main_help(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "TypeScript type mapping" in result.stdout


class TestLogsCommands:
    """Tests for the logs commands."""

    def test_summary(self) -> None:
        from tsdecl.logging import DiagnosticLog, UNMAPPED_TYPE

        with tempfile.TemporaryDirectory() as tmpdir:
            log = DiagnosticLog(quiet=True)
            log.report(UNMAPPED_TYPE, "java.nio.ByteBuffer")
            log.report(UNMAPPED_TYPE, "java.nio.ByteBuffer")
            log.write_log(Path(tmpdir))

            result = runner.invoke(app, ["logs", "show", "-b", tmpdir])
            assert result.exit_code == 0
            assert "java.nio.ByteBuffer" in result.stdout

            result = runner.invoke(app, ["logs", "summary", "-b", tmpdir])
            assert result.exit_code == 0
            assert "ByteBuffer" in result.stdout

    def test_show_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(app, ["logs", "show", "-b", tmpdir])

            assert result.exit_code == 0
            assert "No diagnostics found." in result.stdout
