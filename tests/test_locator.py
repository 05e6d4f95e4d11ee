"""Tests for the upward project file search."""

from __future__ import annotations

import os

import pytest

from csprojkit.dotnet.locator import (
    find_nearest_ancestor_match,
    iter_ancestor_dirs,
    matching_entries,
)
from csprojkit.dotnet.storage import FileStorage

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
WEBAPP_DIR = os.path.join(FIXTURES_DIR, "sdk_app", "WebApp")
WEBAPP = os.path.join(WEBAPP_DIR, "WebApp.csproj")


class TestFindNearestAncestorMatch:
    @pytest.mark.asyncio
    async def test_finds_project_from_nested_file(self):
        start = os.path.join(WEBAPP_DIR, "Controllers", "HomeController.cs")
        assert await find_nearest_ancestor_match(start, "*.csproj", FileStorage()) == WEBAPP

    @pytest.mark.asyncio
    async def test_start_file_need_not_exist(self):
        start = os.path.join(WEBAPP_DIR, "Controllers", "NewController.cs")
        assert await find_nearest_ancestor_match(start, "*.csproj", FileStorage()) == WEBAPP

    @pytest.mark.asyncio
    async def test_start_at_directory(self):
        assert await find_nearest_ancestor_match(WEBAPP_DIR, "*.csproj", FileStorage()) == WEBAPP

    @pytest.mark.asyncio
    async def test_start_at_project_file(self):
        assert await find_nearest_ancestor_match(WEBAPP, "*.csproj", FileStorage()) == WEBAPP

    @pytest.mark.asyncio
    async def test_nearest_wins(self, tmp_path):
        (tmp_path / "Outer.csproj").write_text("<Project />")
        inner = tmp_path / "src" / "Inner"
        inner.mkdir(parents=True)
        (inner / "Inner.csproj").write_text("<Project />")

        found = await find_nearest_ancestor_match(str(inner / "Program.cs"), "*.csproj", FileStorage())
        assert found == str(inner / "Inner.csproj")

    @pytest.mark.asyncio
    async def test_walks_several_levels_up(self, tmp_path):
        (tmp_path / "Root.csproj").write_text("<Project />")
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)

        found = await find_nearest_ancestor_match(str(deep), "*.csproj", FileStorage())
        assert found == str(tmp_path / "Root.csproj")

    @pytest.mark.asyncio
    async def test_matching_directory_is_skipped(self, tmp_path):
        (tmp_path / "Root.csproj").write_text("<Project />")
        nested = tmp_path / "src"
        (nested / "Fake.csproj").mkdir(parents=True)

        found = await find_nearest_ancestor_match(str(nested), "*.csproj", FileStorage())
        assert found == str(tmp_path / "Root.csproj")

    @pytest.mark.asyncio
    async def test_nothing_found(self, tmp_path):
        assert await find_nearest_ancestor_match(str(tmp_path), "*.csproj", FileStorage()) is None

    @pytest.mark.asyncio
    async def test_stops_listing_at_first_match(self, tmp_path, monkeypatch):
        project_dir = tmp_path / "a" / "b"
        project_dir.mkdir(parents=True)
        (project_dir / "App.csproj").write_text("<Project />")

        listed: list[str] = []
        real_listdir = os.listdir

        def recording_listdir(path):
            listed.append(str(path))
            return real_listdir(path)

        monkeypatch.setattr(os, "listdir", recording_listdir)

        found = await find_nearest_ancestor_match(str(project_dir), "*.csproj", FileStorage())

        assert found == str(project_dir / "App.csproj")
        assert listed == [str(project_dir)]


class TestMatchingEntries:
    def test_sorted_within_directory(self, tmp_path):
        (tmp_path / "B.csproj").write_text("")
        (tmp_path / "A.csproj").write_text("")
        (tmp_path / "notes.txt").write_text("")

        assert matching_entries(str(tmp_path), "*.csproj") == [
            str(tmp_path / "A.csproj"),
            str(tmp_path / "B.csproj"),
        ]

    def test_unreadable_directory_is_empty(self, tmp_path):
        assert matching_entries(str(tmp_path / "missing"), "*.csproj") == []


class TestIterAncestorDirs:
    def test_file_starts_at_parent(self, tmp_path):
        dirs = list(iter_ancestor_dirs(str(tmp_path / "New.cs")))

        assert dirs[0] == str(tmp_path)
        assert dirs[1] == str(tmp_path.parent)
        assert dirs[-1] == os.path.dirname(dirs[-1])
