"""Modelos del dominio: enums, entidades de respuesta y parámetros de petición."""

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
    Page,
    PublicList,
    Subscriber,
    SubscriberExport,
    SubscriberPage,
    Subscription,
    Template,
    UploadedMedia,
)
from listmonk.core.domain.params import (
    ArchiveCampaignParams,
    BlocklistByQueryParams,
    CreateCampaignParams,
    CreateListParams,
    CreateSubscriberParams,
    CreateSubscriptionParams,
    CreateTemplateParams,
    DeleteByQueryParams,
    GetBouncesParams,
    GetCampaignAnalyticsParams,
    GetCampaignsParams,
    GetListsParams,
    GetSubscribersParams,
    ImportSubscribersParams,
    SendTransactionalParams,
    UpdateListMembershipsParams,
    UpdateListParams,
    UpdateSubscriberParams,
)

__all__ = [
    "ArchiveCampaignParams",
    "ArchiveSettings",
    "BlocklistByQueryParams",
    "Bounce",
    "BouncePage",
    "Campaign",
    "CampaignPage",
    "CampaignStatType",
    "CampaignStatus",
    "CampaignType",
    "ContentType",
    "CreateCampaignParams",
    "CreateListParams",
    "CreateSubscriberParams",
    "CreateSubscriptionParams",
    "CreateTemplateParams",
    "DeleteByQueryParams",
    "GetBouncesParams",
    "GetCampaignAnalyticsParams",
    "GetCampaignsParams",
    "GetListsParams",
    "GetSubscribersParams",
    "ImportMode",
    "ImportSettings",
    "ImportStatus",
    "ImportSubscribersParams",
    "ListOptin",
    "ListPage",
    "ListType",
    "MailingList",
    "Media",
    "MediaListItem",
    "MembershipAction",
    "Page",
    "PublicList",
    "SendTransactionalParams",
    "Subscriber",
    "SubscriberExport",
    "SubscriberPage",
    "SubscriberStatus",
    "Subscription",
    "SubscriptionStatus",
    "Template",
    "TemplateType",
    "UpdateListMembershipsParams",
    "UpdateListParams",
    "UpdateSubscriberParams",
    "UploadedMedia",
]
