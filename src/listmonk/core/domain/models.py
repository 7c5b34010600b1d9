"""Modelos de respuesta (Pydantic v2).

Describen las entidades tal como las devuelve el API de listmonk. Los
campos desconocidos se ignoran para tolerar versiones nuevas del servicio.

Nota:
- Los envelopes (`{data: T}` / `{message}`) viven aquí porque son parte del
  contrato del servicio, no del transporte.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from listmonk.core.domain.enums import (
    CampaignStatus,
    CampaignType,
    ContentType,
    ImportMode,
    ListOptin,
    ListType,
    SubscriberStatus,
    SubscriptionStatus,
)

T = TypeVar("T")


class ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DataEnvelope(ApiModel, Generic[T]):
    """Envelope `{data: T}` que envuelve la mayoría de respuestas."""

    data: T


class ErrorEnvelope(ApiModel):
    """Cuerpo de toda respuesta con status distinto de 200."""

    message: str = ""


class Page(ApiModel, Generic[T]):
    """Resultado paginado (`results`, `total`, `page`, `per_page`)."""

    results: list[T] = Field(default_factory=list)
    search: str | None = None
    query: str | None = None
    total: int = 0
    page: int = 0
    per_page: int = 0


# -- Subscribers ---------------------------------------------------------------


class Subscription(ApiModel):
    """Lista a la que pertenece un suscriptor, con el estado de la suscripción."""

    id: int
    uuid: UUID
    type: ListType
    optin: ListOptin
    name: str
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    subscription_status: SubscriptionStatus | None = None
    subscription_created_at: datetime | None = None
    subscription_updated_at: datetime | None = None
    subscription_meta: dict[str, Any] = Field(default_factory=dict)


class Subscriber(ApiModel):
    id: int = Field(..., description="ID numérico del suscriptor.")
    uuid: UUID | None = Field(default=None, description="UUID público del suscriptor.")
    email: str = Field(..., min_length=1, description="Email del suscriptor.")
    name: str = Field(default="", description="Nombre visible.")
    status: SubscriberStatus = Field(
        default=SubscriberStatus.ENABLED,
        description="Estado global: enabled o blocklisted.",
    )
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        alias="attribs",
        description="Atributos arbitrarios (JSON) del suscriptor.",
    )
    lists: list[Subscription] = Field(
        default_factory=list,
        description="Listas a las que está suscrito.",
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ExportProfile(ApiModel):
    id: int
    uuid: UUID | None = None
    email: str
    name: str = ""
    status: SubscriberStatus = SubscriberStatus.ENABLED
    attributes: dict[str, Any] = Field(default_factory=dict, alias="attribs")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ExportSubscription(ApiModel):
    name: str
    type: ListType
    subscription_status: SubscriptionStatus | None = None
    created_at: datetime | None = None


class SubscriberExport(ApiModel):
    """Export de datos de un suscriptor (respuesta sin envelope).

    Los nombres de listas privadas llegan reemplazados por "Private list".
    """

    profile: list[ExportProfile] = Field(default_factory=list)
    subscriptions: list[ExportSubscription] = Field(default_factory=list)
    campaign_views: list[Any] = Field(default_factory=list)
    link_clicks: list[Any] = Field(default_factory=list)


# -- Lists ---------------------------------------------------------------------


class MailingList(ApiModel):
    id: int = Field(..., description="ID numérico de la lista.")
    uuid: UUID | None = Field(default=None, description="UUID público de la lista.")
    type: ListType = Field(..., description="public, private o temporary.")
    optin: ListOptin = Field(..., description="single o double opt-in.")
    name: str = Field(..., description="Nombre de la lista.")
    description: str | None = Field(default=None)
    tags: list[str] = Field(default_factory=list)
    subscriber_count: int = Field(default=0, ge=0)
    subscriber_statuses: dict[str, int] = Field(
        default_factory=dict,
        description="Conteo de suscriptores por estado de suscripción.",
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PublicList(ApiModel):
    uuid: UUID
    name: str


# -- Imports -------------------------------------------------------------------


class ImportStatus(ApiModel):
    name: str = ""
    total: int = 0
    imported: int = 0
    status: str = ""


class ImportSettings(ApiModel):
    """Configuración aceptada por el servicio para un import en curso."""

    mode: ImportMode
    delimiter: str = Field(default=",", alias="delim")
    lists: list[int] = Field(default_factory=list)
    overwrite: bool = False


# -- Campaigns -----------------------------------------------------------------


class CampaignMedia(ApiModel):
    id: int
    filename: str


class CampaignListRef(ApiModel):
    id: int | None = None
    name: str


class Campaign(ApiModel):
    id: int
    uuid: UUID | None = None
    template_id: int | None = None
    type: CampaignType = CampaignType.REGULAR
    messenger: str = "email"
    content_type: ContentType = ContentType.RICHTEXT

    name: str
    subject: str
    from_email: str = ""
    body: str | None = None
    body_source: str | None = None
    alt_body: str | None = Field(default=None, alias="altbody")
    status: CampaignStatus = CampaignStatus.DRAFT
    tags: list[str] = Field(default_factory=list)

    media: list[CampaignMedia] = Field(default_factory=list)
    lists: list[CampaignListRef] = Field(default_factory=list)

    headers: list[dict[str, Any]] = Field(default_factory=list)
    archive: bool = False
    archive_slug: str | None = None
    archive_template_id: int | None = None
    archive_meta: dict[str, Any] = Field(default_factory=dict)

    views: int = 0
    clicks: int = 0
    bounces: int = 0
    sent: int = 0
    to_send: int = 0

    send_at: datetime | None = None
    started_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ArchiveSettings(ApiModel):
    archive: bool = False
    archive_template_id: int | None = None
    archive_meta: dict[str, Any] = Field(default_factory=dict)
    archive_slug: str | None = None


# -- Media ---------------------------------------------------------------------


class MediaListItem(ApiModel):
    id: int
    uuid: UUID | None = None
    filename: str
    uri: str | None = None
    thumb_url: str | None = None
    created_at: datetime | None = None


class Media(ApiModel):
    id: int
    uuid: UUID | None = None
    filename: str
    content_type: str | None = None
    thumb_url: str | None = None
    url: str | None = None
    provider: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None


class UploadedMedia(ApiModel):
    id: int
    uuid: UUID | None = None
    filename: str
    uri: str | None = None
    thumb_uri: str | None = None
    created_at: datetime | None = None


# -- Templates -----------------------------------------------------------------


class Template(ApiModel):
    id: int
    name: str
    type: str | None = None
    subject: str | None = None
    body: str | None = None
    body_source: str | None = None
    is_default: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


# -- Bounces -------------------------------------------------------------------


class BounceCampaign(ApiModel):
    id: int
    name: str


class Bounce(ApiModel):
    id: int
    type: str
    source: str
    email: str
    subscriber_id: int | None = None
    subscriber_uuid: UUID | None = None
    meta: dict[str, Any] = Field(default_factory=dict)
    campaign: BounceCampaign | None = None
    created_at: datetime | None = None


SubscriberPage = Page[Subscriber]
ListPage = Page[MailingList]
CampaignPage = Page[Campaign]
BouncePage = Page[Bounce]
