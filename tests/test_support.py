# 📄 File: tests/test_support.py
# 🧭 Purpose (Layman Explanation):
# Checks the back-office pieces: runtime settings, the audit trail that can never be
# edited, help-desk tickets, in-app notifications and uploaded documents.
# 🧪 Purpose (Technical Summary):
# Tests Setting/AuditLog/AdminActivityLog/SupportTicket/Notification/Document domain
# rules and the support SQLAlchemy repositories (upsert, append-only, bulk read).
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.support

import uuid
from datetime import timedelta

import pytest

from marketplace.modules.identity.domain.models import UserRole
from marketplace.modules.support.domain.models import (
    MASKED_VALUE,
    ActorRole,
    AdminActivityLog,
    AuditLog,
    Document,
    DocumentStorage,
    Notification,
    Setting,
    SettingValueType,
    SupportTicket,
    SupportTicketStatus,
)
from marketplace.modules.support.infrastructure.database.support_repository_impl import (
    AdminActivityLogRepositoryImpl,
    AuditLogRepositoryImpl,
    DocumentRepositoryImpl,
    NotificationRepositoryImpl,
    SettingRepositoryImpl,
    SupportTicketRepositoryImpl,
)
from marketplace.shared.core.exceptions import BusinessRuleViolationError, RepositoryError
from marketplace.shared.utils.helpers import utc_now
from marketplace.shared.utils.logging import log_context


def make_ticket(user_id: uuid.UUID) -> SupportTicket:
    return SupportTicket(
        user_id=user_id,
        role=UserRole.CUSTOMER,
        subject="Refund not received",
        description="Order was cancelled a week ago.",
    )


def make_document(user_id: uuid.UUID, name: str) -> Document:
    return Document(
        user_id=user_id,
        file_name=name,
        mime_type="application/pdf",
        size=2048,
        storage=DocumentStorage(url=f"https://cdn.example.com/{name}"),
    )


# ============================================================================
# SETTINGS
# ============================================================================

@pytest.mark.parametrize(
    "value, expected",
    [
        (True, SettingValueType.BOOLEAN),
        (5, SettingValueType.NUMBER),
        (2.5, SettingValueType.NUMBER),
        ("razorpay", SettingValueType.STRING),
        (["upi", "card"], SettingValueType.ARRAY),
        ({"max": 3}, SettingValueType.JSON),
    ],
)
def test_setting_value_type_is_inferred(value, expected):
    assert Setting(key="feature.flag", value=value).value_type == expected


def test_sensitive_value_is_masked():
    setting = Setting(key="payment.razorpay_secret", value="s3cr3t", is_sensitive=True)
    assert setting.display_value == MASKED_VALUE
    assert setting.value == "s3cr3t"


async def test_set_value_upserts(session):
    repo = SettingRepositoryImpl(session)
    created = await repo.set_value("site.name", "Bazaar")
    updated = await repo.set_value("site.name", "Bazaar India", module="core")

    assert updated.id == created.id
    assert await repo.get_value("site.name") == "Bazaar India"
    assert await repo.get_value("site.missing", default="fallback") == "fallback"
    assert [s.key for s in await repo.list_for_module("core")] == ["site.name"]


async def test_set_value_revives_deleted_key(session):
    repo = SettingRepositoryImpl(session)
    setting = await repo.set_value("feature.cinema_enabled", False)
    await repo.soft_delete(setting.id)
    assert await repo.get_value("feature.cinema_enabled") is None

    revived = await repo.set_value("feature.cinema_enabled", True)
    assert revived.id == setting.id
    assert not revived.is_deleted
    assert revived.value_type == SettingValueType.BOOLEAN
    assert await repo.get_value("feature.cinema_enabled") is True


# ============================================================================
# AUDIT TRAIL
# ============================================================================

class TestAuditLog:
    def test_action_is_normalized(self):
        entry = AuditLog.record("payment success", actor_id=uuid.uuid4())
        assert entry.action == "PAYMENT_SUCCESS"
        assert entry.actor_role == ActorRole.USER

    def test_system_actor_without_id(self):
        assert AuditLog.record("nightly settlement").actor_role == ActorRole.SYSTEM

    def test_request_id_comes_from_log_context(self):
        with log_context(request_id="req-audit-1"):
            entry = AuditLog.record("user login", actor_id=uuid.uuid4())
        assert entry.request_id == "req-audit-1"
        assert AuditLog.record("user logout").request_id is None

    def test_entries_are_frozen(self):
        entry = AuditLog.record("user login")
        with pytest.raises(ValueError):
            entry.action = "TAMPERED"


def test_admin_change_set():
    entry = AdminActivityLog.record(
        uuid.uuid4(),
        "block user",
        "User",
        before={"status": "active", "name": "Asha"},
        after={"status": "blocked", "name": "Asha", "blocked_reason": "fraud"},
    )
    assert entry.action == "BLOCK_USER"
    assert entry.changes.changed_fields() == ["blocked_reason", "status"]


async def test_audit_log_is_append_only(session):
    repo = AuditLogRepositoryImpl(session)
    entity_id = uuid.uuid4()
    entry = await repo.add(AuditLog.record("order created", entity_type="Order", entity_id=entity_id))

    assert [e.id for e in await repo.list_for_entity("Order", entity_id)] == [entry.id]
    with pytest.raises(RepositoryError):
        await repo.save(entry)
    with pytest.raises(RepositoryError):
        await repo.delete(entry.id)


async def test_admin_log_by_admin(session):
    repo = AdminActivityLogRepositoryImpl(session)
    admin_id = uuid.uuid4()
    await repo.add(AdminActivityLog.record(admin_id, "approve product", "Product", entity_id=uuid.uuid4()))

    entries = await repo.list_by_admin(admin_id)
    assert len(entries) == 1
    with pytest.raises(RepositoryError):
        await repo.delete(entries[0].id)


# ============================================================================
# SUPPORT TICKETS
# ============================================================================

class TestSupportTicket:
    def test_first_message_stamps_response_time(self, user_id):
        ticket = make_ticket(user_id)
        first = ticket.add_message(uuid.uuid4(), "Looking into it")
        ticket.add_message(user_id, "Thanks")

        assert ticket.first_response_at == first.created_at
        assert len(ticket.messages) == 2

    def test_flow(self, user_id):
        ticket = make_ticket(user_id)
        staff_id = uuid.uuid4()
        ticket.assign(staff_id)
        assert ticket.status == SupportTicketStatus.IN_PROGRESS

        ticket.resolve()
        ticket.close(rating=4, feedback="quick help")
        assert ticket.status == SupportTicketStatus.CLOSED
        assert ticket.rating == 4

        with pytest.raises(BusinessRuleViolationError):
            ticket.add_message(user_id, "One more thing")

        ticket.reopen()
        assert ticket.closed_at is None
        ticket.add_message(user_id, "One more thing")


async def test_assigned_tickets(session, user_id):
    repo = SupportTicketRepositoryImpl(session)
    staff_id = uuid.uuid4()
    ticket = make_ticket(user_id)
    ticket.assign(staff_id)
    await repo.add(ticket)
    await repo.add(make_ticket(user_id))

    assigned = await repo.list_assigned(staff_id, status=SupportTicketStatus.IN_PROGRESS.value)
    assert [t.id for t in assigned] == [ticket.id]
    assert len(await repo.list_by_user(user_id)) == 2


# ============================================================================
# NOTIFICATIONS & DOCUMENTS
# ============================================================================

async def test_notifications_mark_all_read(session, user_id):
    repo = NotificationRepositoryImpl(session)
    for title in ("Order shipped", "Wallet credited"):
        await repo.add(Notification(user_id=user_id, title=title, message=title))
    await repo.add(Notification(user_id=uuid.uuid4(), title="Other user", message="x"))

    assert await repo.count_unread(user_id) == 2
    assert await repo.mark_all_read(user_id) == 2
    assert await repo.count_unread(user_id) == 0
    assert await repo.list_for_user(user_id, unread_only=True) == []


def test_scheduled_notification_is_unsent(user_id):
    notification = Notification.schedule(user_id, "Reminder", "Your show starts soon", at=utc_now() + timedelta(hours=2))
    assert notification.sent_at is None
    assert not notification.is_sent
    notification.mark_sent()
    assert notification.is_sent and notification.sent_at is not None


async def test_pending_documents(session, user_id):
    repo = DocumentRepositoryImpl(session)
    verified = make_document(user_id, "pan.pdf")
    verified.verify(uuid.uuid4())
    rejected = make_document(user_id, "aadhaar.pdf")
    rejected.reject("blurry scan")
    pending = make_document(user_id, "gst.pdf")
    for document in (verified, rejected, pending):
        await repo.add(document)

    assert [d.file_name for d in await repo.list_pending_verification()] == ["gst.pdf"]
    assert not pending.is_image
