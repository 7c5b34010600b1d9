"""Enumeraciones del API de listmonk.

Todas heredan de `str` para serializarse tal cual en JSON y query strings.
"""

from __future__ import annotations

from enum import Enum


class SubscriberStatus(str, Enum):
    ENABLED = "enabled"
    BLOCKLISTED = "blocklisted"


class SubscriptionStatus(str, Enum):
    UNCONFIRMED = "unconfirmed"
    CONFIRMED = "confirmed"
    UNSUBSCRIBED = "unsubscribed"


class ListType(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    TEMPORARY = "temporary"


class ListOptin(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"


class MembershipAction(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    UNSUBSCRIBE = "unsubscribe"


class CampaignType(str, Enum):
    REGULAR = "regular"
    OPTIN = "optin"


class CampaignStatus(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    RUNNING = "running"
    PAUSED = "paused"
    CANCELLED = "cancelled"
    FINISHED = "finished"


class CampaignStatType(str, Enum):
    """Tipos de analítica disponibles en `/api/campaigns/analytics/{type}`."""

    VIEWS = "views"
    CLICKS = "clicks"
    LINKS = "links"
    BOUNCES = "bounces"


class ContentType(str, Enum):
    RICHTEXT = "richtext"
    HTML = "html"
    MARKDOWN = "markdown"
    PLAIN = "plain"
    VISUAL = "visual"


class TemplateType(str, Enum):
    CAMPAIGN = "campaign"
    CAMPAIGN_VISUAL = "campaign_visual"
    TX = "tx"


class ImportMode(str, Enum):
    SUBSCRIBE = "subscribe"
    BLOCKLIST = "blocklist"
