# This project was developed with assistance from AI tools.
"""
SQLAdmin configuration for database administration UI

Access the admin panel at: http://localhost:8000/admin

Only mounted when DATABASE_URL is configured; the in-memory fallback store
has no admin view. Login uses SQLADMIN_USER / SQLADMIN_PASSWORD unless
SQLADMIN_AUTH_DISABLED=true (dev mode).
"""

import logging

from db import Carrier, ChatMessage, Client, ClientRecord, CoverType, Policy, RecordType
from db.config import db_settings
from db.database import to_async_url
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from starlette.requests import Request
from starlette.responses import Response

from .core.config import settings

logger = logging.getLogger(__name__)


def sync_database_url(url: str) -> str:
    """SQLAdmin requires a sync engine; derive a psycopg2 URL from the async one."""
    return make_url(to_async_url(url)).set(drivername="postgresql+psycopg2").render_as_string(
        hide_password=False
    )


class AdminAuth(AuthenticationBackend):
    """Session-based auth gate for SQLAdmin."""

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = form.get("username")
        password = form.get("password")
        if username == settings.SQLADMIN_USER and password == settings.SQLADMIN_PASSWORD:
            request.session.update({"admin_authenticated": True})
            return True
        return False

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> Response | bool:
        if settings.SQLADMIN_AUTH_DISABLED:
            return True
        return request.session.get("admin_authenticated", False)


class ClientAdmin(ModelView, model=Client):
    column_list = [
        Client.id,
        Client.name,
        Client.business_type,
        Client.city,
        Client.province,
        Client.employees,
        Client.created_at,
    ]
    column_searchable_list = [Client.name, Client.email, Client.business_type]
    column_sortable_list = [Client.id, Client.name, Client.created_at]
    column_default_sort = [(Client.created_at, True)]
    name = "Client"
    name_plural = "Clients"
    icon = "fa-solid fa-building"


class CarrierAdmin(ModelView, model=Carrier):
    column_list = [
        Carrier.id,
        Carrier.name,
        Carrier.website,
        Carrier.min_premium,
        Carrier.max_premium,
    ]
    column_searchable_list = [Carrier.name]
    column_sortable_list = [Carrier.id, Carrier.name]
    name = "Carrier"
    name_plural = "Carriers"
    icon = "fa-solid fa-shield-halved"


class PolicyAdmin(ModelView, model=Policy):
    column_list = [
        Policy.id,
        Policy.client_id,
        Policy.carrier_id,
        Policy.policy_type,
        Policy.status,
        Policy.premium,
        Policy.end_date,
    ]
    column_sortable_list = [Policy.id, Policy.status, Policy.end_date]
    name = "Policy"
    name_plural = "Policies"
    icon = "fa-solid fa-file-contract"


class ClientRecordAdmin(ModelView, model=ClientRecord):
    column_list = [
        ClientRecord.id,
        ClientRecord.client_id,
        ClientRecord.type,
        ClientRecord.value,
        ClientRecord.date,
    ]
    column_default_sort = [(ClientRecord.created_at, True)]
    name = "Client Record"
    name_plural = "Client Records"
    icon = "fa-solid fa-clipboard-list"


class RecordTypeAdmin(ModelView, model=RecordType):
    column_list = [RecordType.id, RecordType.name, RecordType.description]
    name = "Record Type"
    name_plural = "Record Types"
    icon = "fa-solid fa-tags"


class CoverTypeAdmin(ModelView, model=CoverType):
    column_list = [CoverType.id, CoverType.type]
    name = "Cover Type"
    name_plural = "Cover Types"
    icon = "fa-solid fa-umbrella"


class ChatMessageAdmin(ModelView, model=ChatMessage):
    column_list = [
        ChatMessage.id,
        ChatMessage.client_id,
        ChatMessage.role,
        ChatMessage.timestamp,
    ]
    column_sortable_list = [ChatMessage.id, ChatMessage.timestamp]
    column_default_sort = [(ChatMessage.timestamp, True)]
    can_create = False
    can_edit = False
    name = "Chat Message"
    name_plural = "Chat Messages"
    icon = "fa-solid fa-comments"


def setup_admin(app) -> Admin | None:
    """Set up SQLAdmin and mount it to the FastAPI app (skipped without a database)."""
    if not db_settings.DATABASE_URL:
        logger.info("SQLAdmin not mounted: DATABASE_URL is not configured")
        return None

    engine = create_engine(sync_database_url(db_settings.DATABASE_URL), echo=False)
    auth_backend = AdminAuth(
        secret_key=settings.SQLADMIN_SECRET_KEY,
    )
    admin = Admin(app, engine, title="BrokerGPT Admin", authentication_backend=auth_backend)

    admin.add_view(ClientAdmin)
    admin.add_view(CarrierAdmin)
    admin.add_view(PolicyAdmin)
    admin.add_view(ClientRecordAdmin)
    admin.add_view(RecordTypeAdmin)
    admin.add_view(CoverTypeAdmin)
    admin.add_view(ChatMessageAdmin)

    return admin
