import pytest
from typer.testing import CliRunner

from commscal.terminal.app import app

runner = CliRunner()

ENTRIES_YAML = """\
- id: gala
  title: Gala
  category: [event]
  summary: Annual gala
  issue: true
  significance: medium
  lead_organization: provincial
  schedule_status: confirmed
  start_date: '2024-03-10T18:00'
  end_date: '2024-03-10T21:00'
  all_day: false
  representatives: [Minister of Energy]
- id: day-of
  title: Observance
  category: [observance]
  summary: Day of observance
  issue: false
  significance: low
  lead_organization: federal
  schedule_status: unknown
  start_date: '2024-03-10T00:00'
  end_date: '2024-03-10T23:59'
  all_day: true
"""


@pytest.fixture
def entries_file(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(ENTRIES_YAML, encoding="utf-8")
    return path


def invoke(entries_file, *args):
    return runner.invoke(app, ["--no-header", "--data-file", str(entries_file), *args])


def test_day_view(entries_file):
    result = invoke(entries_file, "calendar", "day", "--date", "2024-03-10")

    assert result.exit_code == 0, result.output
    assert "Gala" in result.output
    assert "Observance" in result.output


@pytest.mark.parametrize("view", ["week", "w", "month", "m"])
def test_week_and_month_views(entries_file, view):
    result = invoke(entries_file, "cal", view, "--date", "2024-03-10")

    assert result.exit_code == 0, result.output


def test_search_and_offset(entries_file):
    result = invoke(
        entries_file, "calendar", "day", "--date", "2024-03-09", "--offset", "1", "-q", "gala"
    )

    assert result.exit_code == 0, result.output
    assert "Gala" in result.output
    assert "Observance" not in result.output


def test_entries_table(entries_file):
    result = invoke(entries_file, "entries", "--status", "confirmed")

    assert result.exit_code == 0, result.output
    assert "Gala" in result.output
    assert "Observance" not in result.output


def test_entries_rejects_unknown_category(entries_file):
    result = invoke(entries_file, "en", "--category", "podcast")

    assert result.exit_code == 2


def test_invalid_entry_exits_with_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("- id: x\n  title: No dates\n", encoding="utf-8")

    result = invoke(path, "calendar", "month", "--date", "2024-03-10")

    assert result.exit_code == 1


def test_missing_entries_file(tmp_path):
    result = invoke(tmp_path / "missing.yaml", "entries")

    assert result.exit_code == 1


def test_bad_date_option(entries_file):
    result = invoke(entries_file, "calendar", "day", "--date", "someday")

    assert result.exit_code == 2


def test_month_view_shows_events_of_neighbouring_month_days(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        "- id: kickoff\n"
        "  title: Kickoff\n"
        "  category: [event]\n"
        "  start_date: '2024-02-27T00:00'\n"
        "  end_date: '2024-02-27T23:59'\n"
        "  all_day: true\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["--no-header", "--data-file", str(path), "cal", "month", "--date", "2024-03-10"],
        env={"COLUMNS": "200"},
    )

    assert result.exit_code == 0, result.output
    assert "Kickoff" in result.output


def test_entries_table_rejects_unparseable_date(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        "- id: vague\n"
        "  title: Vague\n"
        "  category: [event]\n"
        "  start_date: 'next tuesday'\n"
        "  end_date: '2024-03-10T10:00'\n"
        "  all_day: false\n",
        encoding="utf-8",
    )

    result = invoke(path, "entries")

    assert result.exit_code == 1


@pytest.mark.parametrize("column", ["location", "comms_contact", "venue"])
def test_entries_rejects_unsortable_column(entries_file, column):
    result = invoke(entries_file, "entries", "--sort", column)

    assert result.exit_code == 2


def test_entries_sorted_by_start_date(entries_file):
    result = invoke(entries_file, "entries", "--sort", "desc start_date")

    assert result.exit_code == 0, result.output
    assert result.output.index("Gala") < result.output.index("Observance")


def test_help_lists_groups_before_commands(entries_file):
    result = invoke(entries_file, "--help")

    assert result.exit_code == 0, result.output
    assert result.output.index("calendar, cal") < result.output.index("entries, en")
    assert result.output.index("config, c") < result.output.index("entries, en")
