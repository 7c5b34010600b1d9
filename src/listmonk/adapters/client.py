"""Cliente asíncrono del API de listmonk.

Cada método público es un call site delgado sobre `_call`: construye los
parámetros, elige el `Endpoint` de la tabla y devuelve el payload tipado.

Ejemplo:

    async with ListmonkClient(ClientSettings(base_url=..., api_user=..., api_token=...)) as lm:
        page = await lm.get_subscribers(GetSubscribersParams(list_ids=[1, 2]))
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from listmonk.adapters import endpoints as ep
from listmonk.adapters.endpoints import Endpoint, RequestMode
from listmonk.adapters.envelope import decode_response
from listmonk.adapters.http_client import build_async_client
from listmonk.adapters.transport import ApiRequest, FileContent, Transport, encode_json_body
from listmonk.core.config import ClientSettings
from listmonk.core.domain.enums import CampaignStatType, CampaignStatus
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
from listmonk.core.domain.params import (
    ArchiveCampaignParams,
    BlocklistByQueryParams,
    CampaignStatusBody,
    CampaignTestBody,
    CreateCampaignParams,
    CreateListParams,
    CreateSubscriberParams,
    CreateSubscriptionParams,
    CreateTemplateParams,
    DeleteAllQuery,
    DeleteByQueryParams,
    GetBouncesParams,
    GetCampaignAnalyticsParams,
    GetCampaignsParams,
    GetListsParams,
    GetSubscribersParams,
    IDsBody,
    IDsQuery,
    ImportSubscribersParams,
    NoBodyQuery,
    SendTransactionalParams,
    UpdateListMembershipsParams,
    UpdateListParams,
    UpdateSubscriberParams,
)
from listmonk.core.errors import DecodeError
from listmonk.core.interfaces.http import AsyncHTTPClient

Params = BaseModel | Mapping[str, Any] | None


class ListmonkClient:
    """Cliente tipado para una instancia de listmonk.

    - `settings` es inmutable y se comparte sin locks entre llamadas concurrentes.
    - `http_client` es opcional; si no se inyecta, el cliente crea uno propio y
      lo cierra en `aclose()`. Un cliente inyectado lo cierra quien lo creó.
    - Cada método hace exactamente un round trip; cancelar la tarea que lo
      espera propaga `asyncio.CancelledError`.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        http_client: AsyncHTTPClient | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._owns_http = http_client is None
        self._http = http_client or build_async_client(self._settings)
        self._transport = Transport(self._settings, self._http)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def __aenter__(self) -> "ListmonkClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _call(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, Any] | None = None,
        query: Params = None,
        body: Params = None,
        timeout: float | None = None,
    ) -> Any:
        if query is not None and endpoint.request is not RequestMode.QUERY:
            raise TypeError(f"{endpoint.name} does not take query parameters")
        if body is not None and endpoint.request is not RequestMode.JSON:
            raise TypeError(f"{endpoint.name} does not take a JSON body")

        request = ApiRequest(
            method=endpoint.method,
            path=endpoint.render_path(**(path_params or {})),
            query=query,
            body=body,
            timeout=timeout,
        )
        response = await self._transport.send(request)
        return decode_response(response, endpoint.response, endpoint.result)

    async def _upload(
        self,
        endpoint: Endpoint,
        *,
        fields: Mapping[str, str],
        files: Mapping[str, Any],
        timeout: float | None = None,
    ) -> Any:
        response = await self._transport.send_multipart(
            endpoint.render_path(), fields=fields, files=files, timeout=timeout
        )
        return decode_response(response, endpoint.response, endpoint.result)

    # -- Subscribers -----------------------------------------------------------

    async def get_subscribers(
        self, params: GetSubscribersParams | None = None, *, timeout: float | None = None
    ) -> SubscriberPage:
        """Consulta suscriptores (búsqueda SQL, listas, estado, orden y página)."""

        return await self._call(ep.GET_SUBSCRIBERS, query=params, timeout=timeout)

    async def get_subscriber(self, subscriber_id: int, *, timeout: float | None = None) -> Subscriber:
        return await self._call(ep.GET_SUBSCRIBER, path_params={"id": subscriber_id}, timeout=timeout)

    async def export_subscriber(
        self, subscriber_id: int, *, timeout: float | None = None
    ) -> SubscriberExport:
        """Export de perfil, suscripciones, vistas y clics de un suscriptor."""

        return await self._call(
            ep.EXPORT_SUBSCRIBER, path_params={"id": subscriber_id}, timeout=timeout
        )

    async def get_subscriber_bounces(
        self, subscriber_id: int, *, timeout: float | None = None
    ) -> list[Bounce]:
        return await self._call(
            ep.GET_SUBSCRIBER_BOUNCES, path_params={"id": subscriber_id}, timeout=timeout
        )

    async def create_subscriber(
        self, params: CreateSubscriberParams, *, timeout: float | None = None
    ) -> Subscriber:
        return await self._call(ep.CREATE_SUBSCRIBER, body=params, timeout=timeout)

    async def send_optin_confirmation(
        self, subscriber_id: int, *, timeout: float | None = None
    ) -> bool:
        """Reenvía el email de confirmación de opt-in."""

        return await self._call(
            ep.SEND_OPTIN_CONFIRMATION, path_params={"id": subscriber_id}, timeout=timeout
        )

    async def create_public_subscription(
        self, params: CreateSubscriptionParams, *, timeout: float | None = None
    ) -> bool:
        """Suscripción pública (formulario) a listas identificadas por UUID."""

        await self._call(ep.CREATE_PUBLIC_SUBSCRIPTION, body=params, timeout=timeout)
        return True

    async def update_list_memberships(
        self, params: UpdateListMembershipsParams, *, timeout: float | None = None
    ) -> bool:
        return await self._call(ep.UPDATE_LIST_MEMBERSHIPS, body=params, timeout=timeout)

    async def update_subscriber(
        self,
        subscriber_id: int,
        params: UpdateSubscriberParams,
        *,
        timeout: float | None = None,
    ) -> Subscriber:
        """Reemplaza los datos de un suscriptor (ver `UpdateSubscriberParams`)."""

        return await self._call(
            ep.UPDATE_SUBSCRIBER, path_params={"id": subscriber_id}, body=params, timeout=timeout
        )

    async def blocklist_subscriber(self, subscriber_id: int, *, timeout: float | None = None) -> bool:
        return await self._call(
            ep.BLOCKLIST_SUBSCRIBER, path_params={"id": subscriber_id}, timeout=timeout
        )

    async def blocklist_subscribers(
        self, subscriber_ids: list[int], *, timeout: float | None = None
    ) -> bool:
        return await self._call(
            ep.BLOCKLIST_SUBSCRIBERS, body=IDsBody(ids=subscriber_ids), timeout=timeout
        )

    async def blocklist_subscribers_by_query(
        self, params: BlocklistByQueryParams, *, timeout: float | None = None
    ) -> bool:
        return await self._call(ep.BLOCKLIST_SUBSCRIBERS_BY_QUERY, body=params, timeout=timeout)

    async def delete_subscriber(self, subscriber_id: int, *, timeout: float | None = None) -> bool:
        return await self._call(
            ep.DELETE_SUBSCRIBER, path_params={"id": subscriber_id}, timeout=timeout
        )

    async def delete_subscriber_bounces(
        self, subscriber_id: int, *, timeout: float | None = None
    ) -> bool:
        return await self._call(
            ep.DELETE_SUBSCRIBER_BOUNCES, path_params={"id": subscriber_id}, timeout=timeout
        )

    async def delete_subscribers(
        self, subscriber_ids: list[int], *, timeout: float | None = None
    ) -> bool:
        return await self._call(
            ep.DELETE_SUBSCRIBERS, query=IDsQuery(ids=subscriber_ids), timeout=timeout
        )

    async def delete_subscribers_by_query(
        self, params: DeleteByQueryParams, *, timeout: float | None = None
    ) -> bool:
        return await self._call(ep.DELETE_SUBSCRIBERS_BY_QUERY, body=params, timeout=timeout)

    # -- Lists -----------------------------------------------------------------

    async def get_lists(
        self, params: GetListsParams | None = None, *, timeout: float | None = None
    ) -> ListPage:
        return await self._call(ep.GET_LISTS, query=params, timeout=timeout)

    async def get_public_lists(self, *, timeout: float | None = None) -> list[PublicList]:
        """Listas públicas (nombre + UUID); el servicio no exige autenticación."""

        return await self._call(ep.GET_PUBLIC_LISTS, timeout=timeout)

    async def get_list(self, list_id: int, *, timeout: float | None = None) -> MailingList:
        return await self._call(ep.GET_LIST, path_params={"id": list_id}, timeout=timeout)

    async def create_list(
        self, params: CreateListParams, *, timeout: float | None = None
    ) -> MailingList:
        return await self._call(ep.CREATE_LIST, body=params, timeout=timeout)

    async def update_list(
        self, list_id: int, params: UpdateListParams, *, timeout: float | None = None
    ) -> MailingList:
        return await self._call(
            ep.UPDATE_LIST, path_params={"id": list_id}, body=params, timeout=timeout
        )

    async def delete_list(self, list_id: int, *, timeout: float | None = None) -> bool:
        return await self._call(ep.DELETE_LIST, path_params={"id": list_id}, timeout=timeout)

    # -- Imports ---------------------------------------------------------------

    async def get_import_status(self, *, timeout: float | None = None) -> ImportStatus:
        return await self._call(ep.GET_IMPORT_STATUS, timeout=timeout)

    async def get_import_logs(self, *, timeout: float | None = None) -> str:
        return await self._call(ep.GET_IMPORT_LOGS, timeout=timeout)

    async def import_subscribers(
        self,
        params: ImportSubscribersParams,
        file: FileContent,
        *,
        filename: str | None = None,
        timeout: float | None = None,
    ) -> ImportSettings:
        """Sube un CSV (opcionalmente ZIP) para importar suscriptores.

        `params` viaja como JSON en el campo `params`; el fichero en `file`.
        """

        config = encode_json_body(params).decode("utf-8")
        upload: Any = (filename, file) if filename else file
        return await self._upload(
            ep.IMPORT_SUBSCRIBERS,
            fields={"params": config},
            files={"file": upload},
            timeout=timeout,
        )

    async def abort_import(self, *, timeout: float | None = None) -> ImportStatus:
        """Detiene y elimina el import en curso."""

        return await self._call(ep.ABORT_IMPORT, timeout=timeout)

    # -- Campaigns -------------------------------------------------------------

    async def get_campaigns(
        self, params: GetCampaignsParams | None = None, *, timeout: float | None = None
    ) -> CampaignPage:
        return await self._call(ep.GET_CAMPAIGNS, query=params, timeout=timeout)

    async def get_campaign(
        self, campaign_id: int, *, no_body: bool = False, timeout: float | None = None
    ) -> Campaign:
        return await self._call(
            ep.GET_CAMPAIGN,
            path_params={"id": campaign_id},
            query=NoBodyQuery(no_body=no_body),
            timeout=timeout,
        )

    async def get_campaign_preview(self, campaign_id: int, *, timeout: float | None = None) -> str:
        """HTML renderizado de la campaña."""

        return await self._call(
            ep.GET_CAMPAIGN_PREVIEW, path_params={"id": campaign_id}, timeout=timeout
        )

    async def get_running_campaign_stats(
        self, campaign_ids: list[int], *, timeout: float | None = None
    ) -> list[dict[str, Any]]:
        return await self._call(
            ep.GET_RUNNING_CAMPAIGN_STATS, query=IDsQuery(ids=campaign_ids), timeout=timeout
        )

    async def get_campaign_analytics(
        self,
        params: GetCampaignAnalyticsParams | None = None,
        *,
        campaign_ids: list[int] | None = None,
        stat: CampaignStatType | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        timeout: float | None = None,
    ) -> list[dict[str, Any]]:
        """Serie temporal de vistas, clics, enlaces o rebotes.

        Acepta un `GetCampaignAnalyticsParams` o sus campos sueltos.
        """

        if params is None:
            params = GetCampaignAnalyticsParams(ids=campaign_ids, type=stat, start=start, end=end)
        return await self._call(
            ep.GET_CAMPAIGN_ANALYTICS,
            path_params={"type": params.type},
            query=params,
            timeout=timeout,
        )

    async def create_campaign(
        self, params: CreateCampaignParams, *, timeout: float | None = None
    ) -> Campaign:
        return await self._call(ep.CREATE_CAMPAIGN, body=params, timeout=timeout)

    async def test_campaign(
        self, campaign_id: int, subscribers: list[str], *, timeout: float | None = None
    ) -> None:
        """Envía la campaña a emails arbitrarios de prueba."""

        await self._call(
            ep.TEST_CAMPAIGN,
            path_params={"id": campaign_id},
            body=CampaignTestBody(subscribers=subscribers),
            timeout=timeout,
        )

    async def update_campaign(
        self, campaign_id: int, params: CreateCampaignParams, *, timeout: float | None = None
    ) -> Campaign:
        return await self._call(
            ep.UPDATE_CAMPAIGN, path_params={"id": campaign_id}, body=params, timeout=timeout
        )

    async def change_campaign_status(
        self, campaign_id: int, status: CampaignStatus, *, timeout: float | None = None
    ) -> Campaign:
        return await self._call(
            ep.CHANGE_CAMPAIGN_STATUS,
            path_params={"id": campaign_id},
            body=CampaignStatusBody(status=status),
            timeout=timeout,
        )

    async def archive_campaign(
        self, campaign_id: int, params: ArchiveCampaignParams, *, timeout: float | None = None
    ) -> ArchiveSettings:
        """Publica (o retira) la campaña del archivo público."""

        return await self._call(
            ep.ARCHIVE_CAMPAIGN, path_params={"id": campaign_id}, body=params, timeout=timeout
        )

    async def delete_campaign(self, campaign_id: int, *, timeout: float | None = None) -> bool:
        return await self._call(
            ep.DELETE_CAMPAIGN, path_params={"id": campaign_id}, timeout=timeout
        )

    # -- Media -----------------------------------------------------------------

    async def get_media_list(self, *, timeout: float | None = None) -> list[MediaListItem]:
        return await self._call(ep.GET_MEDIA_LIST, timeout=timeout)

    async def get_media(self, media_id: int, *, timeout: float | None = None) -> Media:
        return await self._call(ep.GET_MEDIA, path_params={"id": media_id}, timeout=timeout)

    async def upload_media(
        self,
        file: FileContent,
        *,
        filename: str | None = None,
        timeout: float | None = None,
    ) -> UploadedMedia:
        upload: Any = (filename, file) if filename else file
        return await self._upload(
            ep.UPLOAD_MEDIA, fields={}, files={"file": upload}, timeout=timeout
        )

    async def delete_media(self, media_id: int, *, timeout: float | None = None) -> bool:
        return await self._call(ep.DELETE_MEDIA, path_params={"id": media_id}, timeout=timeout)

    # -- Templates -------------------------------------------------------------

    async def get_templates(self, *, timeout: float | None = None) -> list[Template]:
        return await self._call(ep.GET_TEMPLATES, timeout=timeout)

    async def get_template(self, template_id: int, *, timeout: float | None = None) -> Template:
        return await self._call(ep.GET_TEMPLATE, path_params={"id": template_id}, timeout=timeout)

    async def get_template_preview(self, template_id: int, *, timeout: float | None = None) -> str:
        return await self._call(
            ep.GET_TEMPLATE_PREVIEW, path_params={"id": template_id}, timeout=timeout
        )

    async def create_template(
        self, params: CreateTemplateParams, *, timeout: float | None = None
    ) -> Template:
        templates = await self._call(ep.CREATE_TEMPLATE, body=params, timeout=timeout)
        return _first_template(templates, ep.CREATE_TEMPLATE)

    async def update_template(
        self, template_id: int, params: CreateTemplateParams, *, timeout: float | None = None
    ) -> Template:
        templates = await self._call(
            ep.UPDATE_TEMPLATE, path_params={"id": template_id}, body=params, timeout=timeout
        )
        return _first_template(templates, ep.UPDATE_TEMPLATE)

    async def set_default_template(
        self, template_id: int, *, timeout: float | None = None
    ) -> Template:
        return await self._call(
            ep.SET_DEFAULT_TEMPLATE, path_params={"id": template_id}, timeout=timeout
        )

    async def delete_template(self, template_id: int, *, timeout: float | None = None) -> bool:
        return await self._call(
            ep.DELETE_TEMPLATE, path_params={"id": template_id}, timeout=timeout
        )

    # -- Transactional ---------------------------------------------------------

    async def send_transactional(
        self, params: SendTransactionalParams, *, timeout: float | None = None
    ) -> bool:
        """Envía un mensaje transaccional con una plantilla `tx`."""

        return await self._call(ep.SEND_TRANSACTIONAL, body=params, timeout=timeout)

    # -- Bounces ---------------------------------------------------------------

    async def get_bounces(
        self, params: GetBouncesParams | None = None, *, timeout: float | None = None
    ) -> BouncePage:
        return await self._call(ep.GET_BOUNCES, query=params, timeout=timeout)

    async def delete_all_bounces(self, *, timeout: float | None = None) -> bool:
        return await self._call(ep.DELETE_ALL_BOUNCES, query=DeleteAllQuery(), timeout=timeout)

    async def delete_bounces(self, bounce_ids: list[int], *, timeout: float | None = None) -> bool:
        return await self._call(
            ep.DELETE_BOUNCES, query=IDsQuery(ids=bounce_ids), timeout=timeout
        )

    async def delete_bounce(self, bounce_id: int, *, timeout: float | None = None) -> bool:
        return await self._call(ep.DELETE_BOUNCE, path_params={"id": bounce_id}, timeout=timeout)


def _first_template(templates: list[Template], endpoint: Endpoint) -> Template:
    if not templates:
        raise DecodeError(f"{endpoint.name}: response contained no templates")
    return templates[0]
