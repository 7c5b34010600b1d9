"""Modelos de petición: parámetros de query y cuerpos JSON.

Reglas:
- El alias de cada campo es la clave en el query string o en el JSON.
- Los campos `None` no se envían (ni en query ni en cuerpo).
- Los campos con `exclude=True` solo alimentan el path del endpoint.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer
from pydantic.config import ConfigDict

from listmonk.core.domain.enums import (
    CampaignStatType,
    CampaignStatus,
    CampaignType,
    ContentType,
    ImportMode,
    ListOptin,
    ListType,
    MembershipAction,
    SubscriberStatus,
    SubscriptionStatus,
    TemplateType,
)


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


# -- Query params --------------------------------------------------------------


class GetSubscribersParams(RequestModel):
    query: str | None = Field(default=None, description="Expresión SQL para filtrar suscriptores.")
    list_ids: list[int] | None = Field(
        default=None,
        alias="list_id",
        description="IDs de listas; la clave se repite por cada valor.",
    )
    subscription_status: SubscriptionStatus | None = Field(
        default=None,
        description="Estado de suscripción (solo con uno o más list_id).",
    )
    order_by: str | None = Field(default=None, description="name, status, created_at, updated_at.")
    order: str | None = Field(default=None, description="ASC o DESC.")
    page: int | None = Field(default=None, ge=1)
    per_page: int | str | None = Field(default=None, description="Resultados por página o 'all'.")


class GetListsParams(RequestModel):
    query: str | None = None
    status: list[str] | None = None
    tags: list[str] | None = Field(default=None, alias="tag")
    order_by: str | None = None
    order: str | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | str | None = None


class GetCampaignsParams(RequestModel):
    query: str | None = None
    status: list[CampaignStatus] | None = None
    tags: list[str] | None = None
    order_by: str | None = None
    order: str | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | str | None = None
    no_body: bool | None = Field(default=None, description="Omite el cuerpo de cada campaña.")


class GetCampaignAnalyticsParams(RequestModel):
    ids: list[int] = Field(..., alias="id", min_length=1)
    type: CampaignStatType = Field(..., exclude=True)
    start: datetime = Field(..., alias="from")
    end: datetime = Field(..., alias="to")


class GetBouncesParams(RequestModel):
    campaign_id: int | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | str | None = None
    source: str | None = None
    order_by: str | None = None
    order: str | None = None


class IDsQuery(RequestModel):
    ids: list[int] = Field(..., alias="id")


class NoBodyQuery(RequestModel):
    no_body: bool = False


class DeleteAllQuery(RequestModel):
    delete_all: bool = Field(default=True, alias="all")


# -- Bodies: subscribers -------------------------------------------------------


class CreateSubscriberParams(RequestModel):
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    status: SubscriberStatus = SubscriberStatus.ENABLED
    lists: list[int] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict, alias="attribs")
    preconfirm_subscriptions: bool = False


class UpdateSubscriberParams(RequestModel):
    """Actualización completa de un suscriptor.

    El servicio reemplaza las suscripciones con `lists`: si se omite, el
    suscriptor queda fuera de todas sus listas.
    """

    email: str | None = None
    name: str | None = None
    status: SubscriberStatus | None = None
    lists: list[int] | None = None
    attributes: dict[str, Any] | None = Field(default=None, alias="attribs")
    preconfirm_subscriptions: bool | None = None


class CreateSubscriptionParams(RequestModel):
    email: str = Field(..., min_length=1)
    name: str = ""
    list_uuids: list[UUID] = Field(default_factory=list)


class UpdateListMembershipsParams(RequestModel):
    ids: list[int] = Field(..., min_length=1)
    action: MembershipAction
    target_list_ids: list[int] = Field(..., min_length=1)
    status: SubscriptionStatus | None = Field(
        default=None,
        description="Requerido con action=add.",
    )


class IDsBody(RequestModel):
    ids: list[int]


class BlocklistByQueryParams(RequestModel):
    query: str
    list_ids: list[int] | None = None


class DeleteByQueryParams(RequestModel):
    query: str | None = None
    list_ids: list[int] | None = None
    delete_all: bool | None = Field(
        default=None,
        alias="all",
        description="Ignora `query` y borra todos los suscriptores.",
    )


# -- Bodies: lists -------------------------------------------------------------


class CreateListParams(RequestModel):
    name: str = Field(..., min_length=1)
    type: ListType = ListType.PRIVATE
    optin: ListOptin = ListOptin.SINGLE
    tags: list[str] = Field(default_factory=list)
    description: str | None = None


class UpdateListParams(RequestModel):
    name: str | None = None
    type: ListType | None = None
    optin: ListOptin | None = None
    tags: list[str] | None = None
    description: str | None = None


# -- Bodies: imports -----------------------------------------------------------


class ImportSubscribersParams(RequestModel):
    """Configuración enviada en el campo `params` del multipart de import."""

    mode: ImportMode = ImportMode.SUBSCRIBE
    delimiter: str = Field(default=",", alias="delim", min_length=1, max_length=1)
    lists: list[int] = Field(default_factory=list)
    overwrite: bool = False


# -- Bodies: campaigns ---------------------------------------------------------


class CreateCampaignParams(RequestModel):
    name: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    lists: list[int] = Field(..., min_length=1)
    from_email: str | None = None
    type: CampaignType | None = None
    content_type: ContentType | None = None
    body: str | None = None
    body_source: str | None = None
    alt_body: str | None = Field(default=None, alias="altbody")
    send_at: datetime | None = None
    messenger: str | None = None
    template_id: int | None = None
    tags: list[str] | None = None
    headers: list[dict[str, str]] | None = None


class CampaignTestBody(RequestModel):
    subscribers: list[str] = Field(..., min_length=1)


class CampaignStatusBody(RequestModel):
    status: CampaignStatus


class ArchiveCampaignParams(RequestModel):
    archive: bool = True
    archive_template_id: int | None = None
    archive_meta: dict[str, Any] | None = None
    archive_slug: str | None = None


# -- Bodies: templates ---------------------------------------------------------


class CreateTemplateParams(RequestModel):
    name: str = Field(..., min_length=1)
    type: TemplateType = TemplateType.CAMPAIGN
    subject: str | None = Field(default=None, description="Solo para plantillas tx.")
    body: str = Field(..., min_length=1)
    body_source: str | None = None


# -- Bodies: transactional -----------------------------------------------------


class SendTransactionalParams(RequestModel):
    """Mensaje transaccional sobre una plantilla `tx` preconfigurada.

    Los destinatarios se indican con `subscriber_email`, `subscriber_id` o
    sus variantes plurales. `data` queda disponible en la plantilla como
    `{{ .Tx.Data.* }}`.
    """

    subscriber_email: str | None = None
    subscriber_id: int | None = None
    subscriber_emails: list[str] | None = None
    subscriber_ids: list[int] | None = None
    template_id: int
    from_email: str | None = None
    data: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    messenger: str | None = None
    content_type: ContentType | None = None

    @field_serializer("headers")
    def _headers_as_pairs(self, headers: dict[str, str] | None) -> list[dict[str, str]] | None:
        # El servicio espera [{"X-Header": "valor"}, ...].
        if headers is None:
            return None
        return [{key: value} for key, value in headers.items()]
