"""Shared test fixtures."""

import pytest

from pywiql.fields import FieldDescriptor, FieldType
from pywiql.lookup import build_field_lookup
from tests.trees import Query

FIELDS = [
    FieldDescriptor("Title", "System.Title", FieldType.STRING),
    FieldDescriptor("Assigned To", "System.AssignedTo", FieldType.IDENTITY),
    FieldDescriptor("ID", "System.Id", FieldType.INTEGER),
    FieldDescriptor("Effort", "Microsoft.VSTS.Scheduling.Effort", FieldType.DOUBLE),
    FieldDescriptor(
        "Remaining Work", "Microsoft.VSTS.Scheduling.RemainingWork", FieldType.DOUBLE,
    ),
    FieldDescriptor("Created Date", "System.CreatedDate", FieldType.DATE_TIME),
    FieldDescriptor("Build Id", "Custom.BuildId", FieldType.GUID),
    FieldDescriptor("Description", "System.Description", FieldType.HTML),
    FieldDescriptor("History", "System.History", FieldType.HISTORY),
    FieldDescriptor("Area Path", "System.AreaPath", FieldType.TREE_PATH),
    FieldDescriptor("Blocked", "Custom.Blocked", FieldType.BOOLEAN),
    FieldDescriptor("Link Type", "System.Links.LinkType", FieldType.STRING),
]


@pytest.fixture
def fields():
    return list(FIELDS)


@pytest.fixture
def lookup():
    return build_field_lookup(FIELDS)


@pytest.fixture
def q():
    return Query()
