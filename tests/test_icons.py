"""Tests for application icon lookup."""

from space_agent.icons import find_application_paths


def test_finds_bundles_in_search_order(tmp_path):
    system = tmp_path / "System"
    user = tmp_path / "User"
    (system / "Safari.app").mkdir(parents=True)
    (user / "Safari.app").mkdir(parents=True)
    (user / "Ghostty.app").mkdir(parents=True)
    (user / "README.txt").write_text("not an app")

    found = find_application_paths(["Safari", "Ghostty", "Missing"], search_dirs=[str(system), str(user)])

    assert found == {
        "Safari": str(system / "Safari.app"),
        "Ghostty": str(user / "Ghostty.app"),
    }


def test_missing_directories_are_skipped(tmp_path):
    assert find_application_paths(["Safari"], search_dirs=[str(tmp_path / "nope")]) == {}


def test_no_names(tmp_path):
    assert find_application_paths([], search_dirs=[str(tmp_path)]) == {}
