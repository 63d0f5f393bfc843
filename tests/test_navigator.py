import logging
import os
from pathlib import Path

import pytest

from treenav import (
    NamespaceProvider,
    NavigationKind,
    Navigator,
    NavigatorConfig,
    NodeView,
    ProviderError,
    Unselected,
    default_config,
)


class ScriptedProvider(NamespaceProvider):
    """Returns canned views per token and records rebases."""

    def __init__(self, provider_type: str, responses: dict[str, NodeView] | None = None) -> None:
        self._type = provider_type
        self.responses = dict(responses or {})
        self.rebased: list[str] = []

    def provider_type(self) -> str:
        return self._type

    def rebase(self, root_spec: str) -> None:
        self.rebased.append(root_spec)

    def step(self, token: str) -> NodeView:
        return self.responses.get(token) or NodeView.inside(self._type, [], self._type)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "leaf.txt").write_text("leaf")
    (tmp_path / "notes.md").write_text("notes")
    return tmp_path


def make_navigator(
    tree: Path,
    *,
    volumes: list[str] | None = None,
    separator: str = os.sep,
) -> Navigator:
    config = default_config(
        fs_root=tree,
        list_volumes=lambda: volumes if volumes is not None else [str(tree)],
        list_windows=lambda: ["Editor", "Terminal"],
        separator=separator,
    )
    return Navigator(config)


def test_starts_on_unselected_root(tree: Path):
    navigator = make_navigator(tree)
    view = navigator.current_view()
    assert navigator.active == "root"
    assert view.kind is NavigationKind.INSIDE
    assert view.children == ("0:Disk", "1:Windows")


def test_index_token_moves_cursor_to_branch(tree: Path):
    navigator = make_navigator(tree)
    view = navigator.advance("0:Disk")
    assert navigator.active == "Disk"
    assert view.name == "Disks"
    assert view.children == (str(tree),)


def test_volume_descends_into_folder_tree(tree: Path):
    navigator = make_navigator(tree)
    navigator.advance("0:Disk")
    view = navigator.advance(str(tree))
    assert navigator.active == "FileSystem"
    assert view.kind is NavigationKind.INSIDE
    assert view.name == str(tree)
    assert view.children == ("a", "notes.md")


@pytest.mark.skipif(os.name == "nt", reason="uses a directory literally named 'C\\'")
def test_volume_rebase_appends_separator_to_step_text(tmp_path: Path, monkeypatch):
    drive = tmp_path / "C\\"
    drive.mkdir()
    (drive / "Users").mkdir()
    (drive / "pagefile.sys").write_text("")
    monkeypatch.chdir(tmp_path)

    navigator = make_navigator(tmp_path, volumes=["C"], separator="\\")
    navigator.advance("0:Disk")
    assert navigator.active == "Disk"
    navigator.advance("C")
    assert navigator.active == "FileSystem"
    assert navigator.provider("FileSystem").path == Path("C\\")

    view = navigator.current_view()
    assert view.kind is NavigationKind.INSIDE
    assert view.name == "C\\"
    assert view.children == ("Users", "pagefile.sys")


def test_descent_does_not_double_the_separator():
    child = ScriptedProvider("Child")
    parent = ScriptedProvider("Parent", {"/": NodeView.end_child("/", "Parent")})
    config = NavigatorConfig.build(
        [parent, child],
        root="Parent",
        child_of={"Parent": "Child"},
        separator="/",
    )
    navigator = Navigator(config)
    navigator.advance("/")
    assert child.rebased == ["/"]


def test_inside_step_returns_authoritative_view(tree: Path):
    navigator = make_navigator(tree)
    navigator.advance("0:Disk")
    navigator.advance(str(tree))
    moved = navigator.advance("a")
    assert moved.name == str(tree / "a")
    assert navigator.current_view() == moved


def test_parent_at_configured_root_is_noop(tree: Path):
    navigator = make_navigator(tree)
    before = navigator.current_view()
    view = navigator.advance("..")
    assert navigator.active == "root"
    assert view == before


def test_malformed_index_leaves_cursor_and_selection(tree: Path):
    navigator = make_navigator(tree)
    before = navigator.current_view()
    assert navigator.advance("abc") == before
    assert navigator.active == "root"
    assert navigator.provider("root").selection == Unselected()


def test_ascent_chain_terminates_at_root(tree: Path):
    navigator = make_navigator(tree)
    navigator.advance("0:Disk")
    navigator.advance(str(tree))
    navigator.advance("a")
    navigator.advance("b")
    assert navigator.provider("FileSystem").path == tree / "a" / "b"

    for _ in range(len((tree / "a" / "b").parts) + 1):
        navigator.advance("..")
        if navigator.active != "FileSystem":
            break
    assert navigator.active == "Disk"

    view = navigator.advance("..")
    assert navigator.active == "root"
    assert navigator.provider("root").selection == Unselected()
    assert view.children == ("0:Disk", "1:Windows")

    assert navigator.advance("..") == view
    assert navigator.active == "root"


def test_windows_branch_is_flat(tree: Path):
    navigator = make_navigator(tree)
    view = navigator.advance("1:Windows")
    assert navigator.active == "Windows"
    assert view.children == ("Editor", "Terminal")
    assert navigator.advance("Editor") == view
    assert navigator.active == "Windows"

    navigator.advance("..")
    assert navigator.active == "root"
    assert navigator.current_view().kind is NavigationKind.INSIDE


def test_file_without_child_provider_keeps_cursor(tree: Path):
    navigator = make_navigator(tree)
    navigator.advance("0:Disk")
    before = navigator.advance(str(tree))
    view = navigator.advance("notes.md")
    assert navigator.active == "FileSystem"
    assert view == before
    assert navigator.provider("FileSystem").path == tree


def test_static_child_wins_over_dynamic_type():
    static = ScriptedProvider("Static")
    dynamic = ScriptedProvider("Dynamic")
    source = ScriptedProvider("Source", {"item": NodeView.end_child("item", "Dynamic")})
    config = NavigatorConfig.build(
        [source, static, dynamic],
        root="Source",
        child_of={"Source": "Static"},
        separator="/",
    )
    navigator = Navigator(config)
    navigator.advance("item")
    assert navigator.active == "Static"
    assert static.rebased == ["item/"]
    assert dynamic.rebased == []


def test_dynamic_type_resolution_rebases_with_view_name():
    target = ScriptedProvider("Target")
    source = ScriptedProvider("Source", {"go": NodeView.end_child("payload", "Target")})
    navigator = Navigator(NavigatorConfig.build([source, target], root="Source"))
    navigator.advance("go")
    assert navigator.active == "Target"
    assert target.rebased == ["payload"]


def test_unresolvable_end_child_is_noop():
    source = ScriptedProvider("Source", {"go": NodeView.end_child("payload", "Elsewhere")})
    navigator = Navigator(NavigatorConfig.build([source], root="Source"))
    view = navigator.advance("go")
    assert navigator.active == "Source"
    assert view == navigator.current_view()


def test_ascent_passes_departing_name_as_hint():
    parent = ScriptedProvider("Parent")
    child = ScriptedProvider("Child", {"..": NodeView.root_parent("child-root", "Child")})
    config = NavigatorConfig.build([parent, child], root="Child", parent_of={"Child": "Parent"})
    navigator = Navigator(config)
    navigator.advance("..")
    assert navigator.active == "Parent"
    assert parent.rebased == ["child-root"]


def test_provider_failure_leaves_cursor_in_place(tree: Path):
    failing = {"on": False}

    def volumes() -> list[str]:
        if failing["on"]:
            raise OSError("device removed")
        return ["C:"]

    navigator = Navigator(default_config(fs_root=tree, list_volumes=volumes, list_windows=list))
    navigator.advance("0:Disk")
    failing["on"] = True
    with pytest.raises(ProviderError):
        navigator.advance("C:")
    assert navigator.active == "Disk"
    assert navigator.provider("FileSystem").path == tree


def test_failed_descent_keeps_cursor_on_volume_list(tree: Path):
    missing = str(tree / "gone")
    navigator = make_navigator(tree, volumes=[missing])
    navigator.advance("0:Disk")
    with pytest.raises(ProviderError):
        navigator.advance(missing)
    assert navigator.active == "Disk"
    assert navigator.current_view().children == (missing,)


def test_unreadable_volume_list_does_not_trap_cursor(tree: Path):
    failing = {"on": False}

    def volumes() -> list[str]:
        if failing["on"]:
            raise OSError("volume table unreadable")
        return ["C:"]

    navigator = Navigator(default_config(fs_root=tree, list_volumes=volumes, list_windows=list))
    navigator.advance("0:Disk")
    failing["on"] = True
    view = navigator.advance("..")
    assert navigator.active == "root"
    assert view.children == ("0:Disk", "1:Windows")


def test_unreadable_filesystem_root_still_ascends(tree: Path, monkeypatch):
    anchor = Path(tree.anchor)
    navigator = make_navigator(tree, volumes=[str(anchor)])
    navigator.advance("0:Disk")
    navigator.advance(str(anchor))
    assert navigator.active == "FileSystem"
    real_scandir = os.scandir

    def flaky_scandir(path):
        if Path(path) == anchor:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", flaky_scandir)
    navigator.advance("..")
    assert navigator.active == "Disk"


def test_folder_failure_leaves_folder_position(tree: Path, monkeypatch):
    navigator = make_navigator(tree)
    navigator.advance("0:Disk")
    navigator.advance(str(tree))
    real_scandir = os.scandir

    def flaky_scandir(path):
        if Path(path) == tree / "a":
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", flaky_scandir)
    with pytest.raises(ProviderError):
        navigator.advance("a")
    assert navigator.active == "FileSystem"
    assert navigator.provider("FileSystem").path == tree


def test_transitions_are_logged(tree: Path, caplog):
    navigator = make_navigator(tree)
    with caplog.at_level(logging.DEBUG, logger="treenav.navigator"):
        navigator.advance("0:Disk")
    assert any("root -> Disk" in record.getMessage() for record in caplog.records)
