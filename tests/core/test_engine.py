"""Tests for the FilterBar facade."""

import pytest

from filterbar.core.catalog import CatalogError, FilterCatalog
from filterbar.core.config import Config, ConfigError, LoggingConfig, PluginsConfig
from filterbar.core.engine import FilterBar
from filterbar.core.plugin import PluginManager
from filterbar.models import DraftFilter, FilterDefinition, LiteralUnit, NumberUnit
from filterbar.plugin import FilterBarPlugin, hookimpl


PORT = FilterDefinition(id="port", name="Port", grammar=[LiteralUnit(text="port="), NumberUnit()])


class PortPlugin(FilterBarPlugin):
    name = "ports"

    @hookimpl
    def get_filter_definitions(self):
        return [PORT]


@pytest.fixture
def plugin_manager():
    manager = PluginManager()
    manager.register(PortPlugin())
    return manager


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Empty home and working directory."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestFilterBar:
    """Tests for FilterBar operations."""

    def test_wraps_definitions_in_catalog(self, status_definition):
        bar = FilterBar([status_definition])
        assert isinstance(bar.catalog, FilterCatalog)
        assert bar.catalog.ids() == ["status"]

    def test_accepts_catalog(self, status_definition):
        catalog = FilterCatalog([status_definition])
        assert FilterBar(catalog).catalog is catalog

    def test_match_suggest_apply(self, status_definition, body_size_definition):
        bar = FilterBar([status_definition, body_size_definition])

        filters = bar.match("hello status=404 bodySize")
        assert filters[0] == DraftFilter("hello bodySize")
        assert filters[1].built_from == "status=404"

        filters[0].text = "bodySize"
        suggestions = bar.suggest(filters[0])
        assert [s.value for s in suggestions] == ["=", ">=", "<="]

        filters = bar.apply(filters, suggestions[1])
        assert filters[0].text == "bodySize>="
        assert len(filters) == 2

    def test_folded_template_is_not_applied(self, body_size_definition):
        bar = FilterBar([body_size_definition])
        filters = [DraftFilter("bodySize>")]

        suggestions = bar.suggest(filters[0])

        assert [(s.value, s.show_as, s.template) for s in suggestions] == [
            (">=", ">={number}", True)
        ]
        assert bar.apply(filters, suggestions[0]) == [DraftFilter("bodySize>")]

    def test_suggest_accepts_text(self, status_definition):
        bar = FilterBar([status_definition])
        assert [s.value for s in bar.suggest("status")] == ["=", "!="]


class TestFromConfig:
    """Tests for FilterBar.from_config."""

    def test_plugins_then_config_filters(self, isolated, plugin_manager):
        (isolated / "filterbar.toml").write_text(
            '[[filters]]\nid = "size"\nname = "Size"\n'
            'grammar = [{ kind = "literal", text = "size=" }, { kind = "number" }]\n'
        )

        bar = FilterBar.from_config(isolated, plugin_manager=plugin_manager)

        assert bar.catalog.ids() == ["port", "size"]
        assert bar.catalog[0] is PORT

    def test_disabled_plugin(self, isolated, plugin_manager):
        (isolated / "filterbar.toml").write_text('[plugins]\ndisabled = ["ports"]\n')

        bar = FilterBar.from_config(isolated, plugin_manager=plugin_manager)

        assert len(bar.catalog) == 0

    def test_explicit_config(self, plugin_manager):
        config = Config(plugins=PluginsConfig(disabled=["ports"]))
        bar = FilterBar.from_config(plugin_manager=plugin_manager, config=config)
        assert len(bar.catalog) == 0

    def test_duplicate_ids_across_sources(self, isolated, plugin_manager):
        (isolated / "filterbar.toml").write_text(
            '[[filters]]\nid = "port"\nname = "Port"\ngrammar = [{ kind = "number" }]\n'
        )

        with pytest.raises(CatalogError, match="Duplicate filter id 'port'"):
            FilterBar.from_config(isolated, plugin_manager=plugin_manager)

    def test_invalid_config(self, isolated, plugin_manager):
        (isolated / "filterbar.toml").write_text('[logging]\nlevel = "loud"\n')

        with pytest.raises(ConfigError):
            FilterBar.from_config(isolated, plugin_manager=plugin_manager)

    def test_discovers_plugins_by_default(self, isolated, monkeypatch):
        discovered = []
        monkeypatch.setattr(PluginManager, "discover", lambda self: discovered.append(self) or [])

        FilterBar.from_config(isolated)

        assert len(discovered) == 1

    def test_enables_logging(self, plugin_manager, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "filterbar.core.engine.setup_logger", lambda **kwargs: calls.append(kwargs)
        )
        config = Config(logging=LoggingConfig(enabled=True, level="DEBUG"))

        FilterBar.from_config(plugin_manager=plugin_manager, config=config)

        assert calls == [{"log_level": "DEBUG"}]

    def test_logs_at_debug(self, plugin_manager, captured_logs):
        FilterBar.from_config(plugin_manager=plugin_manager, config=Config())

        ready = [line.strip() for line in captured_logs if "Filter bar ready" in line]
        assert ready == ["DEBUG|Filter bar ready with filters: port"]
