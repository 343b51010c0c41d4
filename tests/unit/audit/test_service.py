"""Tests for audit logging service."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from starlette.requests import Request

from tenantgate.core.audit.models import AuditLog
from tenantgate.core.audit.service import AuditContext, AuditService


class TestAuditContext:
    """Tests for AuditContext."""

    def test_create_context(self):
        """Test creating an audit context."""
        context = AuditContext(
            ip_address="192.168.1.1",
            user_agent="Mozilla/5.0",
            request_id="req-123",
        )

        assert context.ip_address == "192.168.1.1"
        assert context.user_agent == "Mozilla/5.0"
        assert context.request_id == "req-123"

    def test_create_context_minimal(self):
        context = AuditContext()

        assert context.ip_address is None
        assert context.request_id is None

    def test_from_request(self):
        """Context is read from forwarded headers and request state."""
        request = Request(
            {
                "type": "http",
                "method": "POST",
                "path": "/api/tenants",
                "headers": [
                    (b"user-agent", b"pytest"),
                    (b"x-forwarded-for", b"203.0.113.7, 10.0.0.1"),
                ],
                "client": ("10.0.0.1", 5000),
                "state": {"request_id": "req-abc"},
            }
        )

        context = AuditContext.from_request(request)

        assert context.ip_address == "203.0.113.7"
        assert context.user_agent == "pytest"
        assert context.request_id == "req-abc"


class TestAuditService:
    """Tests for AuditService."""

    @pytest.fixture
    def mock_session(self):
        """Create a mock database session."""
        session = AsyncMock()
        session.add = MagicMock()
        session.flush = AsyncMock()
        return session

    @pytest.fixture
    def audit_context(self):
        return AuditContext(
            ip_address="10.0.0.1",
            user_agent="Test Agent",
            request_id="test-req-123",
        )

    async def test_log_adds_and_flushes(self, mock_session, audit_context):
        service = AuditService(session=mock_session, context=audit_context)

        await service.log(action="CREATE", resource="tenant", resource_id="t-1")

        mock_session.add.assert_called_once()
        mock_session.flush.assert_called_once()

    async def test_log_with_metadata(self, mock_session, audit_context):
        """Entries carry the request context, actor and metadata."""
        service = AuditService(session=mock_session, context=audit_context)
        actor_id = uuid4()

        entry = await service.log(
            action="UPDATE_STATUS",
            resource="tenant",
            resource_id="t-1",
            actor_id=actor_id,
            metadata={"old_status": "active", "new_status": "suspended"},
        )

        assert isinstance(entry, AuditLog)
        assert entry.action == "UPDATE_STATUS"
        assert entry.actor_id == actor_id
        assert entry.request_id == "test-req-123"
        assert entry.ip_address == "10.0.0.1"
        assert entry.metadata_ == {"old_status": "active", "new_status": "suspended"}

    async def test_log_without_context(self, mock_session):
        service = AuditService(session=mock_session)

        entry = await service.log(action="DELETE", resource="tenant")

        assert entry.ip_address is None
        assert entry.actor_id is None
