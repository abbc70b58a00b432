from pathlib import Path

from click.testing import CliRunner

from argon2id_hash.cli import cli


def test_help_commands_run() -> None:
    runner = CliRunner()
    assert runner.invoke(cli, ["--help"]).exit_code == 0
    assert runner.invoke(cli, ["hash", "--help"]).exit_code == 0
    assert runner.invoke(cli, ["verify", "--help"]).exit_code == 0


def test_readme_documents_commands_and_errors() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    readme = (repo_root / "README.md").read_text()

    assert "argon2id-hash verify" in readme
    assert "argon2id-hash info" in readme
    assert "HashMismatch" in readme
