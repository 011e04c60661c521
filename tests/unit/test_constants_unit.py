from __future__ import annotations

import pytest

from easy_dynamodb.constants import (
    AttributeType,
    KeyType,
    ReturnValue,
    WaitState,
    normalize_return_values,
    normalize_table_params,
)


def test_tokens_match_wire_protocol() -> None:
    assert [member.value for member in AttributeType] == ["S", "N", "B"]
    assert [member.value for member in KeyType] == ["HASH", "RANGE"]
    assert [member.value for member in ReturnValue] == ["NONE", "ALL_OLD", "UPDATED_OLD", "ALL_NEW", "UPDATED_NEW"]
    assert [member.value for member in WaitState] == ["table_exists", "table_not_exists"]


def test_normalize_table_params_covers_secondary_indexes() -> None:
    params = {
        "TableName": "things",
        "KeySchema": [{"AttributeName": "pk", "KeyType": KeyType.HASH}, {"AttributeName": "sk", "KeyType": "RANGE"}],
        "GlobalSecondaryIndexes": [
            {"IndexName": "by-owner", "KeySchema": [{"AttributeName": "owner", "KeyType": KeyType.HASH}]}
        ],
        "GlobalSecondaryIndexUpdates": [
            {"Create": {"IndexName": "by-date", "KeySchema": [{"AttributeName": "date", "KeyType": "HASH"}]}},
            {"Delete": {"IndexName": "old"}},
        ],
    }

    normalized = normalize_table_params(params)

    assert [type(key["KeyType"]) for key in normalized["KeySchema"]] == [str, str]
    assert type(normalized["GlobalSecondaryIndexes"][0]["KeySchema"][0]["KeyType"]) is str
    assert normalized["GlobalSecondaryIndexUpdates"][0]["Create"]["KeySchema"][0]["KeyType"] == "HASH"
    assert normalized["GlobalSecondaryIndexUpdates"][1] == {"Delete": {"IndexName": "old"}}
    assert params["KeySchema"][0]["KeyType"] is KeyType.HASH


def test_normalize_table_params_rejects_unknown_attribute_type() -> None:
    with pytest.raises(ValueError):
        normalize_table_params({"AttributeDefinitions": [{"AttributeName": "pk", "AttributeType": "STRING"}]})


def test_normalize_return_values_leaves_params_without_field_alone() -> None:
    params = {"TableName": "things"}

    assert normalize_return_values(params) is params
    assert normalize_return_values({"ReturnValues": ReturnValue.UPDATED_NEW})["ReturnValues"] == "UPDATED_NEW"
