"""Unit tests for the action catalog."""

import pytest

from script_builder.modules.catalog import (
    ALL_CATEGORIES,
    CATALOG,
    ActionCatalog,
    ActionNotFoundError,
    undeclared_variables,
    unlisted_placeholders,
)


@pytest.fixture
def catalog():
    return ActionCatalog()


class TestCatalogData:
    def test_size(self):
        assert len(CATALOG) == 35

    def test_names_unique(self):
        names = [template.name for template in CATALOG]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("template", CATALOG, ids=lambda template: template.name)
    def test_declared_variables_match_placeholders(self, template):
        assert undeclared_variables(template) == set()
        assert unlisted_placeholders(template) == set()


class TestLookups:
    def test_categories_start_with_all(self, catalog):
        categories = catalog.categories()
        assert categories[0] == ALL_CATEGORIES
        assert {"Audio", "Display", "Process", "Service", "System"} <= set(categories)
        assert len(categories) == len(set(categories))

    def test_filter_by_category(self, catalog):
        audio = catalog.list_templates("Audio")
        assert audio
        assert all(template.category == "Audio" for template in audio)

    def test_all_and_none_return_everything(self, catalog):
        assert len(catalog.list_templates(ALL_CATEGORIES)) == len(catalog)
        assert len(catalog.list_templates()) == len(catalog)

    def test_unknown_action(self, catalog):
        with pytest.raises(ActionNotFoundError):
            catalog.get("Launch Rocket")


class TestBuildInstance:
    def test_copies_command_from_template(self, catalog):
        template = catalog.get("Set Volume")
        instance = catalog.build_instance("Set Volume", {"volume": "40"})
        assert instance.command == template.command
        assert instance.description == template.description
        assert instance.variables == {"volume": "40"}

    def test_instance_is_a_snapshot(self, catalog):
        variables = {"volume": "40"}
        instance = catalog.build_instance("Set Volume", variables)
        variables["volume"] = "90"
        assert instance.variables == {"volume": "40"}

    def test_saved_command_kept_verbatim(self, catalog):
        instance = catalog.build_instance("Switch to LG", command="MultiMonitorTool.exe /enable X")
        assert instance.command == "MultiMonitorTool.exe /enable X"
        assert instance.description == ""

    def test_unknown_action_without_command(self, catalog):
        with pytest.raises(ActionNotFoundError):
            catalog.build_instance("Nope")
