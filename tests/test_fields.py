"""Field type and descriptor tests."""

import pytest

from pywiql._errors import InvalidFieldMetadataError
from pywiql.fields import FieldDescriptor, FieldType


class TestFieldType:
    def test_rest_api_names(self):
        assert FieldType("dateTime") is FieldType.DATE_TIME
        assert FieldType("treePath") is FieldType.TREE_PATH

    def test_case_insensitive(self):
        assert FieldType("DATETIME") is FieldType.DATE_TIME
        assert FieldType("Boolean") is FieldType.BOOLEAN

    def test_unknown(self):
        with pytest.raises(ValueError):
            FieldType("blob")

    def test_str(self):
        assert str(FieldType.PLAIN_TEXT) == "plainText"


class TestFieldDescriptor:
    def test_from_dict(self):
        field = FieldDescriptor.from_dict({
            "name": "Title",
            "referenceName": "System.Title",
            "type": "string",
            "readOnly": False,
        })
        assert field == FieldDescriptor("Title", "System.Title", FieldType.STRING)

    def test_missing_key(self):
        with pytest.raises(InvalidFieldMetadataError) as exc_info:
            FieldDescriptor.from_dict({"name": "Title", "type": "string"})
        assert isinstance(exc_info.value.wrapped, KeyError)
        assert "referenceName" in exc_info.value.internal_details

    def test_unknown_type(self):
        with pytest.raises(InvalidFieldMetadataError) as exc_info:
            FieldDescriptor.from_dict({
                "name": "Blob", "referenceName": "Custom.Blob", "type": "blob",
            })
        assert str(exc_info.value) == "invalid field metadata"

    def test_frozen(self):
        field = FieldDescriptor("Title", "System.Title", FieldType.STRING)
        with pytest.raises(AttributeError):
            field.name = "Other"
