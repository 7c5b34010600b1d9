"""Query encoding tests — parameter models to ordered query pairs.

Invariants:
    - Field alias is the query key; declaration order is preserved
    - List fields repeat the key per element, in original order
    - None is omitted; 0, False and "" are sent
    - exclude=True fields never reach the query string
    - Unsupported value types raise QueryEncodingError
"""

from datetime import datetime, timezone
from urllib.parse import parse_qsl, urlencode

import pytest
from pydantic import BaseModel, Field

from listmonk.core.domain.enums import CampaignStatType, CampaignStatus, SubscriptionStatus
from listmonk.core.domain.params import (
    DeleteAllQuery,
    GetCampaignAnalyticsParams,
    GetCampaignsParams,
    GetSubscribersParams,
    IDsQuery,
)
from listmonk.core.errors import QueryEncodingError
from listmonk.core.querystring import to_query_pairs


# -- to_query_pairs ------------------------------------------------------------


def test_none_params_encode_to_nothing():
    assert to_query_pairs(None) == []


def test_unset_fields_are_omitted():
    """A params model with nothing set produces an empty query."""
    assert to_query_pairs(GetSubscribersParams()) == []


def test_alias_is_query_key_and_list_repeats_in_order():
    params = GetSubscribersParams(list_ids=[9, 2, 5], query="subscribers.name LIKE 'A%'")
    pairs = to_query_pairs(params)
    assert pairs == [
        ("query", "subscribers.name LIKE 'A%'"),
        ("list_id", "9"),
        ("list_id", "2"),
        ("list_id", "5"),
    ]


def test_round_trip_through_parse_qsl():
    """Encoding then decoding yields the original values, repeated keys in order."""
    params = GetSubscribersParams(
        query="subscribers.attribs->>'city' = 'Bengaluru'",
        list_ids=[1, 2, 3],
        subscription_status=SubscriptionStatus.CONFIRMED,
        order_by="created_at",
        order="DESC",
        page=2,
        per_page="all",
    )
    decoded = parse_qsl(urlencode(to_query_pairs(params)))
    assert decoded == [
        ("query", "subscribers.attribs->>'city' = 'Bengaluru'"),
        ("list_id", "1"),
        ("list_id", "2"),
        ("list_id", "3"),
        ("subscription_status", "confirmed"),
        ("order_by", "created_at"),
        ("order", "DESC"),
        ("page", "2"),
        ("per_page", "all"),
    ]


def test_enums_lists_and_booleans():
    params = GetCampaignsParams(
        status=[CampaignStatus.RUNNING, CampaignStatus.PAUSED],
        no_body=True,
    )
    assert to_query_pairs(params) == [
        ("status", "running"),
        ("status", "paused"),
        ("no_body", "true"),
    ]


def test_false_is_sent_not_omitted():
    assert to_query_pairs(GetCampaignsParams(no_body=False)) == [("no_body", "false")]


def test_delete_all_uses_all_key():
    assert to_query_pairs(DeleteAllQuery()) == [("all", "true")]


def test_ids_query_repeats_id():
    assert urlencode(to_query_pairs(IDsQuery(ids=[4, 4, 1]))) == "id=4&id=4&id=1"


def test_excluded_path_field_and_datetimes():
    """`type` feeds the path only; from/to are ISO-8601."""
    params = GetCampaignAnalyticsParams(
        ids=[1, 2],
        type=CampaignStatType.VIEWS,
        start=datetime(2024, 1, 1, tzinfo=timezone.utc),
        end=datetime(2024, 2, 1, 12, 30, tzinfo=timezone.utc),
    )
    pairs = to_query_pairs(params)
    assert ("type", "views") not in pairs
    assert pairs == [
        ("id", "1"),
        ("id", "2"),
        ("from", "2024-01-01T00:00:00+00:00"),
        ("to", "2024-02-01T12:30:00+00:00"),
    ]


def test_mapping_source_is_accepted():
    assert to_query_pairs({"id": [3, 1], "all": None, "page": 0}) == [
        ("id", "3"),
        ("id", "1"),
        ("page", "0"),
    ]


# -- errors --------------------------------------------------------------------


class _Nested(BaseModel):
    x: int = 1


class _BadParams(BaseModel):
    filters: dict = Field(default_factory=lambda: {"a": 1})


class _NestedParams(BaseModel):
    inner: _Nested = Field(default_factory=_Nested)


def test_dict_value_raises():
    with pytest.raises(QueryEncodingError, match="filters"):
        to_query_pairs(_BadParams())


def test_nested_model_raises():
    with pytest.raises(QueryEncodingError, match="inner"):
        to_query_pairs(_NestedParams())


def test_unsupported_source_raises():
    with pytest.raises(QueryEncodingError):
        to_query_pairs(["not", "a", "mapping"])
