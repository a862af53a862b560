"""Integration tests for CLI commands."""

import os
import subprocess
import sys

import pytest
import typer

APP_GUID = "55555555-5555-5555-5555-555555555555"
LIB_GUID = "66666666-6666-6666-6666-666666666666"


@pytest.fixture
def workspace(tmp_path):
    """A solution with two projects in their own directories."""
    sln = tmp_path / "Demo.sln"
    sln.write_text(
        "Microsoft Visual Studio Solution File, Format Version 12.00\n"
        f'Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "App", "App\\App.csproj", "{{{APP_GUID}}}"\n'
        "EndProject\n"
        f'Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "Lib", "Lib\\Lib.csproj", "{{{LIB_GUID}}}"\n'
        "EndProject\n"
        "Global\n"
        "EndGlobal\n"
    )
    for name in ("App", "Lib"):
        (tmp_path / name).mkdir()
        (tmp_path / name / f"{name}.csproj").write_text("<Project />")
    return tmp_path


def run_cli(args, home, input=None):
    env = dict(os.environ, DELETEPROJECT_HOME=str(home))
    return subprocess.run(
        [sys.executable, "-m", "deleteproject", *args],
        capture_output=True,
        text=True,
        input=input,
        env=env,
    )


def test_list_projects(workspace):
    result = run_cli(["list", str(workspace / "Demo.sln")], workspace / "home")
    assert result.returncode == 0
    assert "App" in result.stdout
    assert "Lib" in result.stdout


def test_delete_project(workspace):
    result = run_cli(["delete", str(workspace / "Demo.sln"), "Lib", "--yes"], workspace / "home")
    assert result.returncode == 0
    assert "Deleted project 'Lib'" in result.stdout
    assert not (workspace / "Lib").exists()
    assert (workspace / "App").exists()
    text = (workspace / "Demo.sln").read_text()
    assert LIB_GUID not in text
    assert APP_GUID in text


def test_delete_confirm_prompt(workspace):
    result = run_cli(["delete", str(workspace / "Demo.sln"), "App", "Lib"], workspace / "home", input="y\n")
    assert result.returncode == 0
    assert "Projects 'App', 'Lib'" in result.stdout
    assert not (workspace / "App").exists()
    assert not (workspace / "Lib").exists()


def test_delete_cancelled(workspace):
    before = (workspace / "Demo.sln").read_text()
    result = run_cli(["delete", str(workspace / "Demo.sln"), "App"], workspace / "home", input="n\n")
    assert result.returncode == 0
    assert "Aborted." in result.stdout
    assert (workspace / "App").exists()
    assert (workspace / "Demo.sln").read_text() == before


def test_delete_unknown_project(workspace):
    result = run_cli(["delete", str(workspace / "Demo.sln"), "Nope", "--yes"], workspace / "home")
    assert result.returncode == 1
    assert (workspace / "App").exists()
    assert (workspace / "Lib").exists()


def test_delete_reports_failure(workspace):
    import shutil

    shutil.rmtree(workspace / "Lib")
    result = run_cli(["delete", str(workspace / "Demo.sln"), "Lib", "App", "--yes"], workspace / "home")
    assert result.returncode == 1
    assert "'Lib':" in result.stderr
    assert not (workspace / "App").exists()
    # Lib is still detached from the solution.
    assert LIB_GUID not in (workspace / "Demo.sln").read_text()


def test_delete_with_backup(workspace):
    result = run_cli(
        ["delete", str(workspace / "Demo.sln"), "App", "--yes", "--backup"], workspace / "home"
    )
    assert result.returncode == 0
    assert APP_GUID in (workspace / "Demo.sln.bak").read_text()


def test_config_set_and_show(workspace):
    home = workspace / "home"
    result = run_cli(["config", "backup", "true"], home)
    assert result.returncode == 0
    assert (home / "config.yaml").exists()

    result = run_cli(["config"], home)
    assert "backup: true" in result.stdout


def test_config_unknown_key(workspace):
    result = run_cli(["config", "nope"], workspace / "home")
    assert result.returncode == 1


def test_delete_unknown_bracketed_name(workspace):
    result = run_cli(["delete", str(workspace / "Demo.sln"), "Lib[/x]", "--yes"], workspace / "home")
    assert result.returncode == 1
    assert "Traceback" not in result.stderr
    assert "Lib[/x]" in result.stderr
    assert "not found" in result.stderr


def test_list_shows_bracketed_names(tmp_path):
    sln = tmp_path / "Tags.sln"
    sln.write_text(
        "Microsoft Visual Studio Solution File, Format Version 12.00\n"
        f'Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "Core[bold]", "Core\\Core.csproj", "{{{APP_GUID}}}"\n'
        "EndProject\n"
    )
    result = run_cli(["list", str(sln)], tmp_path / "home")
    assert result.returncode == 0
    assert "Core[bold]" in result.stdout


def test_delete_reports_unwritable_solution(workspace, monkeypatch):
    from deleteproject.cli.delete import delete
    from deleteproject.core.solution import SolutionFile

    def fail_save(self, path=None, backup=False):
        raise PermissionError(13, "Permission denied", self.file_name)

    monkeypatch.setenv("DELETEPROJECT_HOME", str(workspace / "home"))
    monkeypatch.setattr(SolutionFile, "save", fail_save)

    with pytest.raises(typer.Exit) as exc:
        delete(workspace / "Demo.sln", ["Lib"], yes=True, no_save=False, backup=None)

    assert exc.value.exit_code == 1
    assert not (workspace / "Lib").exists()
