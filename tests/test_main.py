"""
End-to-end tests for the CLI entry points.

Tests cover:
- unused: JSON and text output over a small indexed project
- unused: flag validation and the only/except precedence warning
- read-ctags: tags listing and the missing tags file error
- parse_likelihoods / parse_filetypes: flag value parsing
"""

import json

import pytest
from typer.testing import CliRunner

from main import app, parse_filetypes, parse_likelihoods, tags_app
from models import Language, UsageLikelihoodStatus

runner = CliRunner()

TAGS = (
    "!_TAG_FILE_FORMAT\t2\t/extended format/\n"
    'Person\tapp/person.rb\t/^class Person$/;"\tc\tlanguage:Ruby\n'
    'full_name\tapp/person.rb\t/^  def full_name$/;"\tf\tlanguage:Ruby\n'
    'name\tapp/person.rb\t/^  def name$/;"\tf\tlanguage:Ruby\n'
)


@pytest.fixture
def indexed_project(project_root, mocker):
    (project_root / "app").mkdir()
    (project_root / "app" / "person.rb").write_text(
        "class Person\n  def name\n    full_name\n  end\n  def full_name\n  end\nend\n"
    )
    (project_root / "spec").mkdir()
    (project_root / "spec" / "person_spec.rb").write_text("Person.new.name\n")
    (project_root / "tags").write_text(TAGS)
    # Empty home directory: no profile store, default profile
    mocker.patch("core.profiles.Path.home", return_value=project_root.parent)
    return project_root


def run_unused(root, *args):
    return runner.invoke(app, ["--path", str(root), "--no-progress", *args])


# ============================================================================
# Tests for the unused command
# ============================================================================


@pytest.mark.integration
def test_unused_json_defaults_to_high_likelihood(indexed_project):
    result = run_unused(indexed_project, "--json")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["token"] for item in payload] == ["Person", "name"]
    assert {item["usage_likelihood"]["reason"] for item in payload} == {
        "Only used in tests"
    }
    assert payload[1]["occurrences"] == {
        "app/person.rb": 1,
        "spec/person_spec.rb": 1,
    }


@pytest.mark.integration
def test_unused_all_likelihoods_sorted_by_likelihood(indexed_project):
    result = run_unused(
        indexed_project, "--json", "-a", "--sort-order", "likelihood", "--reverse"
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["token"] for item in payload] == ["full_name", "name", "Person"]
    assert payload[0]["usage_likelihood"]["status"] == "medium"


@pytest.mark.integration
def test_unused_text_report(indexed_project):
    result = run_unused(indexed_project, "--no-color", "--likelihood", "medium")

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "full_name"
    assert "   Reason: Only used in the file(s) where it is defined" in lines
    assert "== UNUSED SUMMARY ==" in lines
    assert "   Usage likelihood: medium" in lines
    assert "   Configuration setting: default" in lines


@pytest.mark.integration
def test_unused_language_filter(indexed_project):
    result = run_unused(indexed_project, "--json", "--except-filetypes", "rb")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == []


@pytest.mark.integration
def test_unused_without_tags_file_prints_empty_report(project_root, mocker):
    mocker.patch("core.profiles.Path.home", return_value=project_root.parent)

    result = run_unused(project_root, "--json")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == []


@pytest.mark.integration
def test_unused_survives_invalid_profile_store(indexed_project):
    """A profile store that YAML cannot turn into values falls back to default."""
    (indexed_project.parent / ".unused.yml").write_text(
        "- name: Rails\n  testPaths: [2001-02-30]\n"
    )

    result = run_unused(indexed_project, "--no-color")

    assert result.exit_code == 0
    assert "Unexpected Error" not in result.output
    assert "   Configuration setting: default" in result.stdout.splitlines()


@pytest.mark.integration
def test_unused_summary_lists_filtered_extensions(indexed_project):
    result = run_unused(indexed_project, "--no-color", "--only-filetypes", ".rb")

    assert result.exit_code == 0
    assert "   Applied language filters: only: rake, rb" in result.stdout.splitlines()


@pytest.mark.integration
def test_unused_warns_when_only_and_except_given(indexed_project):
    result = run_unused(
        indexed_project, "--json", "--only-filetypes", "rb", "--except-filetypes", "js"
    )

    assert result.exit_code == 0
    assert "--only-filetypes and --except-filetypes" in result.output


@pytest.mark.integration
@pytest.mark.parametrize(
    "args",
    [
        ["--likelihood", "certain"],
        ["--only-filetypes", "cobol"],
        ["--sort-order", "size"],
    ],
)
def test_unused_rejects_invalid_flags(indexed_project, args):
    result = run_unused(indexed_project, *args)

    assert result.exit_code == 2


@pytest.mark.integration
def test_unused_unexpected_error(indexed_project, mocker):
    mocker.patch("main.search_tokens", side_effect=RuntimeError("boom"))

    result = run_unused(indexed_project)

    assert result.exit_code == 1
    assert "Unexpected Error" in result.output
    assert "boom" in result.output


# ============================================================================
# Tests for the read-ctags command
# ============================================================================


@pytest.mark.integration
def test_read_ctags_prints_entries(indexed_project):
    result = runner.invoke(tags_app, ["--path", str(indexed_project)])

    assert result.exit_code == 0
    entries = json.loads(result.stdout)
    assert [e["name"] for e in entries] == ["Person", "full_name", "name"]
    assert entries[0]["kind"] == "class"
    assert entries[0]["language"] == "Ruby"


@pytest.mark.integration
def test_read_ctags_missing_tags_file(project_root):
    result = runner.invoke(tags_app, ["--path", str(project_root)])

    assert result.exit_code == 1
    assert "Tags Error" in result.output


# ============================================================================
# Tests for flag parsing
# ============================================================================


@pytest.mark.unit
def test_parse_likelihoods():
    assert parse_likelihoods("High, low,") == [
        UsageLikelihoodStatus.HIGH,
        UsageLikelihoodStatus.LOW,
    ]
    assert parse_likelihoods("") == []

    with pytest.raises(ValueError, match="Not a valid likelihood: maybe"):
        parse_likelihoods("high,maybe")


@pytest.mark.unit
def test_parse_filetypes():
    assert parse_filetypes(".rb,ex,EXS") == {Language.RUBY, Language.ELIXIR}
    assert parse_filetypes(None) == set()

    with pytest.raises(ValueError, match="Not a supported file extension: cob"):
        parse_filetypes("rb,cob")
