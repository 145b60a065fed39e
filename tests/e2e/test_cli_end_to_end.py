"""
End-to-end tests for the Typer CLI (`enex2mf convert run` / `enex2mf parse run`).
"""

import json

import frontmatter

from enex2mf.cli.main import cli


# ---------------------------------------------------------------------------
# 1. convert run: MindForger
# ---------------------------------------------------------------------------
def test_convert_mindforger_to_stdout(cli_runner, fixture_path):
    result = cli_runner.invoke(cli, ["convert", "run", str(fixture_path("Recipes.enex"))])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("# Recipes <!-- Metadata: type: Outline; ")
    assert "# Pancakes <!-- Metadata: type: Note; tags: food,breakfast; created: " in result.output
    assert "From https://example.com/pancakes" in result.output
    assert "- flour" in result.output
    assert "# Soup <!-- Metadata: type: Note; tags: food; " in result.output
    assert "Boil water." in result.output


def test_convert_mindforger_to_file(cli_runner, fixture_path, tmp_path):
    target = tmp_path / "Recipes.md"
    result = cli_runner.invoke(
        cli,
        ["convert", "run", str(fixture_path("Recipes.enex")), "--output", str(target), "--verbose"],
    )

    assert result.exit_code == 0, result.output
    text = target.read_text(encoding="utf-8")
    assert text.count("<!-- Metadata: type: Note;") == 2
    assert "Converted 2 notes." in result.output


def test_convert_default_title(cli_runner, tmp_path):
    export = tmp_path / "Untitled.enex"
    export.write_text("<en-export><note><tag>t</tag></note></en-export>", encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["convert", "run", str(export), "--default-title", "No title"]
    )

    assert result.exit_code == 0, result.output
    assert "# No title <!-- Metadata: type: Note; tags: t; -->" in result.output


# ---------------------------------------------------------------------------
# 2. convert run: frontmatter
# ---------------------------------------------------------------------------
def test_convert_frontmatter_to_directory(cli_runner, fixture_path, tmp_path):
    out_dir = tmp_path / "vault"
    result = cli_runner.invoke(
        cli,
        [
            "convert",
            "run",
            str(fixture_path("Recipes.enex")),
            "--format",
            "frontmatter",
            "--output",
            str(out_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out_dir.iterdir()) == ["Pancakes.md", "Soup.md"]

    post = frontmatter.load(str(out_dir / "Pancakes.md"))
    assert post["tags"] == ["food", "breakfast"]
    assert post["source_url"] == "https://example.com/pancakes"
    assert "Mix **well**." in post.content


def test_convert_frontmatter_to_stdout(cli_runner, fixture_path):
    result = cli_runner.invoke(
        cli, ["convert", "run", str(fixture_path("simple.enex")), "-f", "frontmatter"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith("---\ntitle: foo\n---")


def test_convert_rejects_unknown_format(cli_runner, fixture_path):
    result = cli_runner.invoke(
        cli, ["convert", "run", str(fixture_path("simple.enex")), "--format", "html"]
    )
    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# 3. convert run: failures
# ---------------------------------------------------------------------------
def test_convert_stops_at_first_structural_error(cli_runner, fixture_path, tmp_path):
    target = tmp_path / "out.md"
    result = cli_runner.invoke(
        cli,
        ["convert", "run", str(fixture_path("bogus_element.enex")), "--output", str(target)],
    )

    assert result.exit_code == 1
    assert "Error: Unexpected <bogus> in <note>" in result.output

    text = target.read_text(encoding="utf-8")
    assert "# first " in text
    assert "# third " not in text


def test_convert_reports_lexical_error(cli_runner, fixture_path):
    result = cli_runner.invoke(cli, ["convert", "run", str(fixture_path("malformed.enex"))])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_convert_missing_input(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, ["convert", "run", str(tmp_path / "missing.enex")])
    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# 4. parse run
# ---------------------------------------------------------------------------
def test_parse_writes_json_artifact(cli_runner, fixture_path, tmp_path):
    target = tmp_path / "parsed_notes.json"
    result = cli_runner.invoke(
        cli, ["parse", "run", str(fixture_path("Recipes.enex")), "--output", str(target)]
    )

    assert result.exit_code == 0, result.output
    assert "Parsed 2 notes." in result.output

    parsed = json.loads(target.read_text(encoding="utf-8"))
    assert [note["title"] for note in parsed] == ["Pancakes", "Soup"]
    assert parsed[0]["tags"] == ["food", "breakfast"]
    assert parsed[1]["updated"] is None
    assert parsed[1]["attributes"]["latitude"] == "52.52"


def test_parse_limit(cli_runner, fixture_path, tmp_path):
    target = tmp_path / "parsed_notes.json"
    result = cli_runner.invoke(
        cli,
        ["parse", "run", str(fixture_path("Recipes.enex")), "--output", str(target), "--limit", "1"],
    )

    assert result.exit_code == 0, result.output
    assert len(json.loads(target.read_text(encoding="utf-8"))) == 1


def test_parse_error_writes_nothing(cli_runner, fixture_path, tmp_path):
    target = tmp_path / "parsed_notes.json"
    result = cli_runner.invoke(
        cli, ["parse", "run", str(fixture_path("bogus_element.enex")), "--output", str(target)]
    )

    assert result.exit_code == 1
    assert not target.exists()


def test_convert_keeps_notes_before_lexical_error(cli_runner, fixture_path, tmp_path):
    target = tmp_path / "out.md"
    result = cli_runner.invoke(
        cli,
        ["convert", "run", str(fixture_path("truncated_after_notes.enex")), "--output", str(target)],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output

    text = target.read_text(encoding="utf-8")
    assert "# kept <!-- Metadata: type: Note; -->" in text
    assert "Still here." in text
