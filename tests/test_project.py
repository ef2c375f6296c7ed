"""Tests for project and domain creation."""

import pytest

from prustbowo.config import load_config
from prustbowo.scaffold.inject import MarkerError
from prustbowo.scaffold.project import create_domain, create_project, crate_ident
from prustbowo.templates import (
    CRATE_IDENT_TOKEN,
    DOMAIN_NAME_TOKEN,
    PROJECT_NAME_TOKEN,
    TemplateTree,
)


@pytest.fixture
def created(tmp_path, fake_runner):
    result = create_project("shop-api", parent_dir=tmp_path, runner=fake_runner)
    return tmp_path / "shop-api", result


class TestCreateProject:
    def test_crate_ident(self):
        assert crate_ident("my-cool-api") == "my_cool_api"
        assert crate_ident("plain") == "plain"

    def test_tree_is_extracted_and_stamped(self, created):
        root, result = created

        assert result["path"] == str(root)
        assert result["crate"] == "shop_api"
        cargo = (root / "Cargo.toml").read_text()
        assert 'name = "shop-api"' in cargo
        assert 'name = "shop_api"' in cargo
        assert "use shop_api::prelude::app_router;" in (root / "cmd" / "main.rs").read_text()

    def test_no_placeholders_remain(self, created):
        root, _ = created
        for path in root.rglob("*"):
            if path.is_file():
                text = path.read_text()
                assert PROJECT_NAME_TOKEN not in text
                assert CRATE_IDENT_TOKEN not in text

    def test_git_initialized(self, created, fake_runner):
        root, result = created
        assert result["git"] is True
        assert [argv[:2] for argv in fake_runner.argvs] == [
            ["git", "init"], ["git", "add"], ["git", "commit"],
        ]
        assert all(cwd == root.resolve() for _, cwd in fake_runner.calls)

    def test_git_failure_still_succeeds(self, tmp_path, make_runner):
        result = create_project("api", parent_dir=tmp_path, runner=make_runner(fail={"git"}))
        assert result["git"] is False
        assert (tmp_path / "api" / "Cargo.toml").exists()

    def test_skip_git(self, tmp_path, fake_runner):
        result = create_project("api", parent_dir=tmp_path, runner=fake_runner, git=False)
        assert result["git"] is False
        assert fake_runner.calls == []

    def test_existing_target_rejected(self, tmp_path, fake_runner):
        (tmp_path / "api").mkdir()
        (tmp_path / "api" / "keep.txt").write_text("mine")

        with pytest.raises(FileExistsError, match="already exists"):
            create_project("api", parent_dir=tmp_path, runner=fake_runner)
        assert sorted(p.name for p in (tmp_path / "api").iterdir()) == ["keep.txt"]
        assert fake_runner.calls == []

    def test_custom_template(self, tmp_path, fake_runner):
        tree = TemplateTree("fixture", {"README": "__PROJECT_NAME__ / __CRATE_IDENT__"})
        create_project("a-b", parent_dir=tmp_path, template=tree, runner=fake_runner)
        assert (tmp_path / "a-b" / "README").read_text() == "a-b / a_b"

    def test_empty_name_rejected(self, tmp_path, fake_runner):
        with pytest.raises(ValueError):
            create_project("", parent_dir=tmp_path, runner=fake_runner)

    def test_yaml_significant_name(self, tmp_path, fake_runner):
        result = create_project("[api", parent_dir=tmp_path, runner=fake_runner)

        root = tmp_path / "[api"
        assert result["git"] is True
        cfg = load_config(root)
        assert cfg.name == "[api"
        assert cfg.crate == "[api"
        create_domain("users", project_dir=root)
        assert "pub mod users;" in (root / "src" / "app" / "domain" / "mod.rs").read_text()

    @pytest.mark.parametrize("name", ["o'neil", "a/b", "a\\b", "two\nlines"])
    def test_unstampable_name_rejected_before_writing(self, tmp_path, fake_runner, name):
        with pytest.raises(ValueError, match="unsupported characters"):
            create_project(name, parent_dir=tmp_path, runner=fake_runner)
        assert list(tmp_path.iterdir()) == []
        assert fake_runner.calls == []


class TestCreateDomain:
    def test_generates_and_registers(self, created):
        root, _ = created
        result = create_domain("billing", project_dir=root)

        domain_dir = root / "src" / "app" / "domain" / "billing"
        assert result["path"] == str(domain_dir.resolve())
        assert result["module_added"] is True

        handler = (domain_dir / "handler.rs").read_text()
        assert "pub fn register_billing_routes(" in handler
        assert DOMAIN_NAME_TOKEN not in handler

        route = (root / "src" / "app" / "route.rs").read_text()
        assert "use crate::app::domain::billing::handler::register_billing_routes;" in route
        assert "router = register_billing_routes(router);" in route
        assert "pub mod billing;" in (root / "src" / "app" / "domain" / "mod.rs").read_text()

    def test_twice_duplicates_routes_but_not_module(self, created):
        root, _ = created
        create_domain("users", project_dir=root)
        result = create_domain("users", project_dir=root)

        assert result["module_added"] is False
        route = (root / "src" / "app" / "route.rs").read_text()
        assert route.count("router = register_users_routes(router);") == 2
        mod = (root / "src" / "app" / "domain" / "mod.rs").read_text()
        assert mod.count("pub mod users;") == 1

    def test_registration_order(self, created):
        root, _ = created
        create_domain("users", project_dir=root)
        create_domain("orders", project_dir=root)

        route = (root / "src" / "app" / "route.rs").read_text()
        assert route.index("register_users_routes(router)") < route.index(
            "register_orders_routes(router)"
        )
        mod_lines = (root / "src" / "app" / "domain" / "mod.rs").read_text().splitlines()
        assert mod_lines[-2:] == ["pub mod users;", "pub mod orders;"]

    def test_missing_markers_fails_before_module_registration(self, created):
        root, _ = created
        route_file = root / "src" / "app" / "route.rs"
        route_file.write_text("pub fn app_router() {}\n")
        mod_before = (root / "src" / "app" / "domain" / "mod.rs").read_text()

        with pytest.raises(MarkerError):
            create_domain("billing", project_dir=root)

        assert route_file.read_text() == "pub fn app_router() {}\n"
        assert (root / "src" / "app" / "domain" / "mod.rs").read_text() == mod_before

    def test_missing_route_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            create_domain("billing", project_dir=tmp_path)

    def test_custom_markers_from_config(self, tmp_path):
        (tmp_path / "prustbowo.yaml").write_text(
            "markers:\n  imports: '# <imports>'\n  routes: '# <routes>'\n"
        )
        (tmp_path / "src" / "app").mkdir(parents=True)
        (tmp_path / "src" / "app" / "route.rs").write_text("# <imports>\n# <routes>\n")

        create_domain("x", project_dir=tmp_path, template=TemplateTree("empty", {}))

        lines = (tmp_path / "src" / "app" / "route.rs").read_text().splitlines()
        assert lines[0] == "# <imports>"
        assert lines[1].startswith("use crate::app::domain::x::")
        assert lines[2] == "# <routes>"
