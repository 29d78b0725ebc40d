"""Tests for grouping a chip's specs into display tables."""

import pytest

from chipsite.core.models import SpecGroupDefinition
from chipsite.data.grouping import group_specs


@pytest.fixture
def groups():
    return SpecGroupDefinition.from_data(
        {
            "groups": [
                {
                    "name": "Core",
                    "fields": [
                        {"key": "cores", "label": "Cores"},
                        {"key": "ghz", "label": "Clock"},
                    ],
                },
                {
                    "name": "Memory",
                    "fields": [
                        {"key": "ram", "label": "RAM"},
                        {"key": "bandwidth", "label": "Bandwidth"},
                    ],
                },
            ]
        }
    ).groups


def _dump(result):
    return [group.model_dump() for group in result]


class TestGroupSpecs:
    """Tests for group_specs."""

    def test_missing_fields_dropped_group_kept(self, groups):
        """A group survives as long as one field has a value."""
        result = group_specs({"ghz": 3.2}, groups[:1])
        assert _dump(result) == [
            {
                "name": "Core",
                "fields": [{"key": "ghz", "label": "Clock", "value": 3.2}],
            }
        ]

    def test_order_follows_definition_not_specs(self, groups):
        specs = {"bandwidth": 100, "ghz": 3.2, "ram": 16, "cores": 8}
        result = group_specs(specs, groups)

        assert [g.name for g in result] == ["Core", "Memory"]
        assert [f.key for f in result[0].fields] == ["cores", "ghz"]
        assert [f.key for f in result[1].fields] == ["ram", "bandwidth"]

    def test_none_value_dropped(self, groups):
        result = group_specs({"cores": None, "ghz": 2.0}, groups)
        assert [f.key for f in result[0].fields] == ["ghz"]

    @pytest.mark.parametrize("value", [0, False, ""])
    def test_falsy_values_kept(self, groups, value):
        """Zero-like values are data, not absence."""
        result = group_specs({"cores": value}, groups)
        assert len(result) == 1
        assert result[0].fields[0].value == value
        assert type(result[0].fields[0].value) is type(value)

    def test_empty_group_omitted(self, groups):
        result = group_specs({"ram": 8}, groups)
        assert [g.name for g in result] == ["Memory"]

    def test_missing_specs_yields_nothing(self, groups):
        assert group_specs(None, groups) == []
        assert group_specs({}, groups) == []

    @pytest.mark.parametrize("specs", [[1, 2], "n/a", 42, True])
    def test_non_mapping_specs_yield_nothing(self, groups, specs):
        """Specs that aren't a mapping behave like missing specs."""
        assert group_specs(specs, groups) == []

    def test_no_groups(self):
        assert group_specs({"cores": 8}, []) == []

    def test_unknown_spec_keys_ignored(self, groups):
        result = group_specs({"tdp": 15, "cores": 4}, groups)
        assert _dump(result)[0]["fields"] == [
            {"key": "cores", "label": "Cores", "value": 4}
        ]

    def test_specs_not_mutated(self, groups):
        specs = {"cores": 8, "ghz": None}
        group_specs(specs, groups)
        assert specs == {"cores": 8, "ghz": None}


class TestSpecGroupDefinition:
    """Tests for loading the group layout."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "specs.yml"
        path.write_text(
            "groups:\n"
            "  - name: Core\n"
            "    fields:\n"
            "      - {key: cores, label: Cores}\n"
        )
        definition = SpecGroupDefinition.from_yaml(path)
        assert definition.groups[0].name == "Core"
        assert [f.key for f in definition.groups[0].fields] == ["cores"]

    @pytest.mark.parametrize("data", [None, [], {"groups": None}, {"other": 1}])
    def test_from_data_non_definition_is_empty(self, data):
        assert SpecGroupDefinition.from_data(data).groups == []

    def test_scalar_labels_and_names_kept(self):
        """YAML numbers and booleans are valid labels, kept as written."""
        definition = SpecGroupDefinition.from_data(
            {
                "groups": [
                    {
                        "name": 2024,
                        "fields": [
                            {"key": "codec", "label": 2024},
                            {"key": "hdr", "label": True},
                        ],
                    }
                ]
            }
        )
        result = group_specs({"codec": "av1", "hdr": "yes"}, definition.groups)
        assert [g.model_dump() for g in result] == [
            {
                "name": 2024,
                "fields": [
                    {"key": "codec", "label": 2024, "value": "av1"},
                    {"key": "hdr", "label": True, "value": "yes"},
                ],
            }
        ]

    def test_integer_keys(self):
        definition = SpecGroupDefinition.from_data(
            {"groups": [{"name": "Years", "fields": [{"key": 2024, "label": "Y"}]}]}
        )
        result = group_specs({2024: "launch"}, definition.groups)
        assert result[0].fields[0].key == 2024
        assert result[0].fields[0].value == "launch"

    def test_group_without_fields(self):
        definition = SpecGroupDefinition.from_data({"groups": [{"name": "Empty"}]})
        assert definition.groups[0].fields == []
        assert group_specs({"x": 1}, definition.groups) == []
