"""ListmonkClient campaign operations."""

from datetime import datetime, timezone

import pytest

from listmonk import DecodeError
from listmonk.core.domain.enums import CampaignStatType, CampaignStatus, ContentType
from listmonk.core.domain.models import Campaign
from listmonk.core.domain.params import (
    ArchiveCampaignParams,
    CreateCampaignParams,
    GetCampaignAnalyticsParams,
    GetCampaignsParams,
)
from payloads import campaign_payload


@pytest.mark.asyncio
async def test_get_campaigns_filters(client, recorder):
    recorder.data({"results": [campaign_payload()], "total": 1, "per_page": 20, "page": 1})

    page = await client.get_campaigns(
        GetCampaignsParams(status=[CampaignStatus.DRAFT, CampaignStatus.SCHEDULED], no_body=True)
    )

    params = recorder.last.url.params
    assert recorder.last.url.path == "/listmonk/api/campaigns"
    assert params.get_list("status") == ["draft", "scheduled"]
    assert params["no_body"] == "true"
    assert page.results[0].lists[0].name == "Weekly"


@pytest.mark.asyncio
async def test_get_campaign_sends_no_body_flag(client, recorder):
    recorder.data(campaign_payload(altbody="plain text"))

    campaign = await client.get_campaign(7)

    assert recorder.last.url.path == "/listmonk/api/campaigns/7"
    assert recorder.last.url.params["no_body"] == "false"
    assert isinstance(campaign, Campaign)
    assert campaign.alt_body == "plain text"
    assert campaign.to_send == 120


@pytest.mark.asyncio
async def test_get_campaign_preview_is_text(client, recorder):
    recorder.reply(text="<html><body><h1>Hi</h1></body></html>")

    html = await client.get_campaign_preview(7)

    assert recorder.last.url.path == "/listmonk/api/campaigns/7/preview"
    assert html == "<html><body><h1>Hi</h1></body></html>"


@pytest.mark.asyncio
async def test_running_stats(client, recorder):
    recorder.data([{"id": 7, "status": "running", "sent": 40, "to_send": 120, "rate": 2.5}])

    stats = await client.get_running_campaign_stats([7, 8])

    assert recorder.last.url.path == "/listmonk/api/campaigns/running/stats"
    assert recorder.last.url.params.get_list("id") == ["7", "8"]
    assert stats[0]["sent"] == 40


@pytest.mark.asyncio
async def test_campaign_analytics_type_in_path(client, recorder):
    recorder.data([{"campaign_id": 7, "count": 10, "timestamp": "2024-06-01T00:00:00Z"}])

    counts = await client.get_campaign_analytics(
        campaign_ids=[7],
        stat=CampaignStatType.CLICKS,
        start=datetime(2024, 6, 1, tzinfo=timezone.utc),
        end=datetime(2024, 6, 30, tzinfo=timezone.utc),
    )

    sent = recorder.last
    assert sent.url.path == "/listmonk/api/campaigns/analytics/clicks"
    assert sent.url.params.get_list("id") == ["7"]
    assert sent.url.params["from"] == "2024-06-01T00:00:00+00:00"
    assert sent.url.params["to"] == "2024-06-30T00:00:00+00:00"
    assert "type" not in sent.url.params
    assert counts[0]["count"] == 10


@pytest.mark.asyncio
async def test_campaign_analytics_accepts_params_model(client, recorder):
    recorder.data([])

    params = GetCampaignAnalyticsParams(
        ids=[1, 2],
        type=CampaignStatType.BOUNCES,
        start=datetime(2024, 1, 1, tzinfo=timezone.utc),
        end=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )
    assert await client.get_campaign_analytics(params) == []
    assert recorder.last.url.path == "/listmonk/api/campaigns/analytics/bounces"


@pytest.mark.asyncio
async def test_create_campaign_body(client, recorder):
    recorder.data(campaign_payload(id=8))

    campaign = await client.create_campaign(
        CreateCampaignParams(
            name="Launch",
            subject="We are live",
            lists=[3],
            content_type=ContentType.MARKDOWN,
            body="# Hello",
            alt_body="Hello",
            send_at=datetime(2024, 7, 1, 9, 0, tzinfo=timezone.utc),
        )
    )

    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/listmonk/api/campaigns"
    assert recorder.last_json() == {
        "name": "Launch",
        "subject": "We are live",
        "lists": [3],
        "content_type": "markdown",
        "body": "# Hello",
        "altbody": "Hello",
        "send_at": "2024-07-01T09:00:00Z",
    }
    assert campaign.id == 8


@pytest.mark.asyncio
async def test_test_campaign_ignores_response(client, recorder):
    recorder.reply(json_body={"data": True})

    result = await client.test_campaign(7, ["qa@example.com"])

    assert result is None
    assert recorder.last.url.path == "/listmonk/api/campaigns/7/test"
    assert recorder.last_json() == {"subscribers": ["qa@example.com"]}


@pytest.mark.asyncio
async def test_update_and_change_status(client, recorder):
    recorder.data(campaign_payload(name="Relaunch"))
    recorder.data(campaign_payload(status="running"))

    updated = await client.update_campaign(
        7, CreateCampaignParams(name="Relaunch", subject="Again", lists=[3])
    )
    running = await client.change_campaign_status(7, CampaignStatus.RUNNING)

    update, status = recorder.requests
    assert (update.method, update.url.path) == ("PUT", "/listmonk/api/campaigns/7")
    assert (status.method, status.url.path) == ("PUT", "/listmonk/api/campaigns/7/status")
    assert status.content == b'{"status": "running"}'
    assert updated.name == "Relaunch"
    assert running.status is CampaignStatus.RUNNING


@pytest.mark.asyncio
async def test_archive_campaign(client, recorder):
    recorder.data({"archive": True, "archive_template_id": 1, "archive_meta": {"name": "x"}, "archive_slug": "launch"})

    archived = await client.archive_campaign(
        7, ArchiveCampaignParams(archive_template_id=1, archive_meta={"name": "x"}, archive_slug="launch")
    )

    assert recorder.last.url.path == "/listmonk/api/campaigns/7/archive"
    assert recorder.last_json()["archive"] is True
    assert archived.archive_slug == "launch"


@pytest.mark.asyncio
async def test_delete_campaign(client, recorder):
    assert await client.delete_campaign(7) is True
    assert recorder.last.method == "DELETE"


@pytest.mark.asyncio
async def test_wrong_result_shape_is_decode_error(client, recorder):
    recorder.data({"unexpected": "shape"})

    with pytest.raises(DecodeError):
        await client.get_campaign(7)
