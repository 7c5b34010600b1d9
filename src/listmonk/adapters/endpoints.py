"""Tabla declarativa de endpoints del API de listmonk.

Cada entrada fija método, plantilla de path, modo de petición, forma de la
respuesta y tipo del resultado. Las pocas respuestas sin envelope
(`BARE`/`TEXT`) están marcadas aquí explícitamente.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote

from listmonk.adapters.envelope import ResponseShape
from listmonk.core.domain.models import (
    ArchiveSettings,
    Bounce,
    BouncePage,
    Campaign,
    CampaignPage,
    ImportSettings,
    ImportStatus,
    ListPage,
    MailingList,
    Media,
    MediaListItem,
    PublicList,
    Subscriber,
    SubscriberExport,
    SubscriberPage,
    Template,
    UploadedMedia,
)


class RequestMode(str, Enum):
    NONE = "none"
    QUERY = "query"
    JSON = "json"
    MULTIPART = "multipart"


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str
    response: ResponseShape = ResponseShape.ENVELOPE
    result: Any = Any
    request: RequestMode = RequestMode.NONE

    def render_path(self, **path_params: Any) -> str:
        values = {
            key: quote(str(value.value if isinstance(value, Enum) else value), safe="")
            for key, value in path_params.items()
        }
        return self.path.format(**values)


E = ResponseShape.ENVELOPE
Q, J, M = RequestMode.QUERY, RequestMode.JSON, RequestMode.MULTIPART

# -- Subscribers
GET_SUBSCRIBERS = Endpoint("get_subscribers", "GET", "/api/subscribers", E, SubscriberPage, Q)
GET_SUBSCRIBER = Endpoint("get_subscriber", "GET", "/api/subscribers/{id}", E, Subscriber)
EXPORT_SUBSCRIBER = Endpoint(
    "export_subscriber", "GET", "/api/subscribers/{id}/export", ResponseShape.BARE, SubscriberExport
)
GET_SUBSCRIBER_BOUNCES = Endpoint(
    "get_subscriber_bounces", "GET", "/api/subscribers/{id}/bounces", E, list[Bounce]
)
CREATE_SUBSCRIBER = Endpoint("create_subscriber", "POST", "/api/subscribers", E, Subscriber, J)
SEND_OPTIN_CONFIRMATION = Endpoint(
    "send_optin_confirmation", "POST", "/api/subscribers/{id}/optin", E, bool
)
CREATE_PUBLIC_SUBSCRIPTION = Endpoint(
    "create_public_subscription", "POST", "/api/public/subscription", ResponseShape.IGNORE, None, J
)
UPDATE_LIST_MEMBERSHIPS = Endpoint(
    "update_list_memberships", "PUT", "/api/subscribers/lists", E, bool, J
)
UPDATE_SUBSCRIBER = Endpoint("update_subscriber", "PUT", "/api/subscribers/{id}", E, Subscriber, J)
BLOCKLIST_SUBSCRIBER = Endpoint(
    "blocklist_subscriber", "PUT", "/api/subscribers/{id}/blocklist", E, bool
)
BLOCKLIST_SUBSCRIBERS = Endpoint(
    "blocklist_subscribers", "PUT", "/api/subscribers/blocklist", E, bool, J
)
BLOCKLIST_SUBSCRIBERS_BY_QUERY = Endpoint(
    "blocklist_subscribers_by_query", "PUT", "/api/subscribers/query/blocklist", E, bool, J
)
DELETE_SUBSCRIBER = Endpoint("delete_subscriber", "DELETE", "/api/subscribers/{id}", E, bool)
DELETE_SUBSCRIBER_BOUNCES = Endpoint(
    "delete_subscriber_bounces", "DELETE", "/api/subscribers/{id}/bounces", E, bool
)
DELETE_SUBSCRIBERS = Endpoint("delete_subscribers", "DELETE", "/api/subscribers", E, bool, Q)
DELETE_SUBSCRIBERS_BY_QUERY = Endpoint(
    "delete_subscribers_by_query", "POST", "/api/subscribers/query/delete", E, bool, J
)

# -- Lists
GET_LISTS = Endpoint("get_lists", "GET", "/api/lists", E, ListPage, Q)
GET_PUBLIC_LISTS = Endpoint(
    "get_public_lists", "GET", "/api/public/lists", ResponseShape.BARE, list[PublicList]
)
GET_LIST = Endpoint("get_list", "GET", "/api/lists/{id}", E, MailingList)
CREATE_LIST = Endpoint("create_list", "POST", "/api/lists", E, MailingList, J)
UPDATE_LIST = Endpoint("update_list", "PUT", "/api/lists/{id}", E, MailingList, J)
DELETE_LIST = Endpoint("delete_list", "DELETE", "/api/lists/{id}", E, bool)

# -- Imports
GET_IMPORT_STATUS = Endpoint("get_import_status", "GET", "/api/import/subscribers", E, ImportStatus)
GET_IMPORT_LOGS = Endpoint("get_import_logs", "GET", "/api/import/subscribers/logs", E, str)
IMPORT_SUBSCRIBERS = Endpoint(
    "import_subscribers", "POST", "/api/import/subscribers", E, ImportSettings, M
)
ABORT_IMPORT = Endpoint("abort_import", "DELETE", "/api/import/subscribers", E, ImportStatus)

# -- Campaigns
GET_CAMPAIGNS = Endpoint("get_campaigns", "GET", "/api/campaigns", E, CampaignPage, Q)
GET_CAMPAIGN = Endpoint("get_campaign", "GET", "/api/campaigns/{id}", E, Campaign, Q)
GET_CAMPAIGN_PREVIEW = Endpoint(
    "get_campaign_preview", "GET", "/api/campaigns/{id}/preview", ResponseShape.TEXT, str
)
GET_RUNNING_CAMPAIGN_STATS = Endpoint(
    "get_running_campaign_stats", "GET", "/api/campaigns/running/stats", E, list[dict[str, Any]], Q
)
GET_CAMPAIGN_ANALYTICS = Endpoint(
    "get_campaign_analytics", "GET", "/api/campaigns/analytics/{type}", E, list[dict[str, Any]], Q
)
CREATE_CAMPAIGN = Endpoint("create_campaign", "POST", "/api/campaigns", E, Campaign, J)
TEST_CAMPAIGN = Endpoint(
    "test_campaign", "POST", "/api/campaigns/{id}/test", ResponseShape.IGNORE, None, J
)
UPDATE_CAMPAIGN = Endpoint("update_campaign", "PUT", "/api/campaigns/{id}", E, Campaign, J)
CHANGE_CAMPAIGN_STATUS = Endpoint(
    "change_campaign_status", "PUT", "/api/campaigns/{id}/status", E, Campaign, J
)
ARCHIVE_CAMPAIGN = Endpoint(
    "archive_campaign", "PUT", "/api/campaigns/{id}/archive", E, ArchiveSettings, J
)
DELETE_CAMPAIGN = Endpoint("delete_campaign", "DELETE", "/api/campaigns/{id}", E, bool)

# -- Media
GET_MEDIA_LIST = Endpoint("get_media_list", "GET", "/api/media", E, list[MediaListItem])
GET_MEDIA = Endpoint("get_media", "GET", "/api/media/{id}", E, Media)
UPLOAD_MEDIA = Endpoint("upload_media", "POST", "/api/media", E, UploadedMedia, M)
DELETE_MEDIA = Endpoint("delete_media", "DELETE", "/api/media/{id}", E, bool)

# -- Templates
GET_TEMPLATES = Endpoint("get_templates", "GET", "/api/templates", E, list[Template])
GET_TEMPLATE = Endpoint("get_template", "GET", "/api/templates/{id}", E, Template)
GET_TEMPLATE_PREVIEW = Endpoint(
    "get_template_preview", "GET", "/api/templates/{id}/preview", ResponseShape.TEXT, str
)
CREATE_TEMPLATE = Endpoint("create_template", "POST", "/api/templates", E, list[Template], J)
UPDATE_TEMPLATE = Endpoint("update_template", "PUT", "/api/templates/{id}", E, list[Template], J)
SET_DEFAULT_TEMPLATE = Endpoint(
    "set_default_template", "PUT", "/api/templates/{id}/default", E, Template
)
DELETE_TEMPLATE = Endpoint("delete_template", "DELETE", "/api/templates/{id}", E, bool)

# -- Transactional
SEND_TRANSACTIONAL = Endpoint("send_transactional", "POST", "/api/tx", E, bool, J)

# -- Bounces
GET_BOUNCES = Endpoint("get_bounces", "GET", "/api/bounces", E, BouncePage, Q)
DELETE_ALL_BOUNCES = Endpoint("delete_all_bounces", "DELETE", "/api/bounces", E, bool, Q)
DELETE_BOUNCES = Endpoint("delete_bounces", "DELETE", "/api/bounces", E, bool, Q)
DELETE_BOUNCE = Endpoint("delete_bounce", "DELETE", "/api/bounces/{id}", E, bool)

ENDPOINTS: tuple[Endpoint, ...] = tuple(
    value for value in list(globals().values()) if isinstance(value, Endpoint)
)
