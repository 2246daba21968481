"""Variable table tests."""

import pytest

from pywiql._errors import InvalidVariableTableError
from pywiql.fields import FieldType
from pywiql.variables import DEFINED_VARIABLES, load_variables


class TestDefinedVariables:
    def test_names_are_lowercase_and_prefixed(self):
        for name in DEFINED_VARIABLES:
            assert name == name.lower()
            assert name.startswith("@")

    def test_known_types(self):
        assert DEFINED_VARIABLES["@me"] is FieldType.STRING
        assert DEFINED_VARIABLES["@today"] is FieldType.DATE_TIME
        assert DEFINED_VARIABLES["@currentiteration"] is FieldType.TREE_PATH

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFINED_VARIABLES["@new"] = FieldType.STRING


class TestLoadVariables:
    def test_normalises_names_and_types(self):
        table = load_variables({"@Me": "String", "@TODAY": FieldType.DATE_TIME})
        assert dict(table) == {"@me": FieldType.STRING, "@today": FieldType.DATE_TIME}

    def test_keeps_order(self):
        table = load_variables({"@b": "string", "@a": "integer", "@c": "double"})
        assert list(table) == ["@b", "@a", "@c"]

    @pytest.mark.parametrize("name", ["me", "@", ""])
    def test_bad_name(self, name):
        with pytest.raises(InvalidVariableTableError) as exc_info:
            load_variables({name: "string"})
        assert str(exc_info.value) == "invalid variable table"

    def test_bad_type(self):
        with pytest.raises(InvalidVariableTableError) as exc_info:
            load_variables({"@me": "person"})
        assert isinstance(exc_info.value.wrapped, ValueError)
        assert "person" in exc_info.value.internal()

    def test_read_only(self):
        table = load_variables({"@me": "string"})
        with pytest.raises(TypeError):
            table["@you"] = FieldType.STRING
