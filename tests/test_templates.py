"""Tests for the bundled template trees."""

import pytest

from prustbowo.config import DEFAULT_IMPORTS_MARKER, DEFAULT_ROUTES_MARKER
from prustbowo.templates import (
    CRATE_IDENT_TOKEN,
    DOMAIN_NAME_TOKEN,
    DOMAIN_TREE,
    PROJECT_NAME_TOKEN,
    PROJECT_TREE,
    TemplateTree,
)


class TestBundledTrees:
    def test_project_tree_has_route_file_with_markers(self):
        route = PROJECT_TREE.files["src/app/route.rs"]
        assert route.count(DEFAULT_IMPORTS_MARKER) == 1
        assert route.count(DEFAULT_ROUTES_MARKER) == 1
        assert route.index(DEFAULT_IMPORTS_MARKER) < route.index(DEFAULT_ROUTES_MARKER)

    def test_project_tree_uses_project_tokens(self):
        content = "".join(PROJECT_TREE.files.values())
        assert PROJECT_NAME_TOKEN in content
        assert CRATE_IDENT_TOKEN in content
        assert DOMAIN_NAME_TOKEN not in content

    def test_domain_tree_uses_domain_token(self):
        assert DOMAIN_NAME_TOKEN in DOMAIN_TREE.files["handler.rs"]
        assert set(DOMAIN_TREE.paths()) == {"handler.rs", "mod.rs", "model.rs"}

    def test_project_tree_ships_config_and_binaries(self):
        paths = PROJECT_TREE.paths()
        for expected in ("prustbowo.yaml", "Cargo.toml", "cmd/main.rs",
                         "cmd/migrate.rs", "cmd/export_openapi.rs",
                         "src/app/domain/mod.rs"):
            assert expected in paths

    def test_files_are_read_only(self):
        with pytest.raises(TypeError):
            PROJECT_TREE.files["new.rs"] = ""


class TestTemplateTree:
    def test_extract_writes_nested_paths(self, tmp_path):
        tree = TemplateTree("fixture", {"a.txt": "A", "sub/dir/b.txt": "B"})
        written = tree.extract(tmp_path)

        assert len(written) == 2
        assert (tmp_path / "a.txt").read_text() == "A"
        assert (tmp_path / "sub" / "dir" / "b.txt").read_text() == "B"

    def test_extract_empty_file(self, tmp_path):
        TemplateTree("fixture", {"db/migrations/.keep": ""}).extract(tmp_path)
        assert (tmp_path / "db" / "migrations" / ".keep").read_text() == ""

    def test_source_mapping_changes_do_not_leak(self):
        source = {"a.txt": "A"}
        tree = TemplateTree("fixture", source)
        source["b.txt"] = "B"
        assert tree.paths() == ["a.txt"]

    @pytest.mark.parametrize("bad", ["/etc/passwd", "../escape.txt", "a/../../b"])
    def test_rejects_unsafe_paths(self, bad):
        with pytest.raises(ValueError, match="unsafe path"):
            TemplateTree("fixture", {bad: "x"})
