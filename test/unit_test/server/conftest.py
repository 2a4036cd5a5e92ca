from email.message import EmailMessage
from typing import AsyncGenerator, Callable, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from funshop.server.core.config import EmailConfig
from funshop.server.services.email import EmailService


class RecordingEmailService(EmailService):
    """Renders real emails but keeps them in memory instead of using SMTP."""

    def __init__(self) -> None:
        super().__init__(EmailConfig(user="shop@mail.com", password="secret"))
        self.sent: List[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        self.sent.append(message)

    def html_of(self, index: int = -1) -> str:
        return self.sent[index].get_body(preferencelist=("html",)).get_content()


@pytest.fixture
def email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, email_service) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the test session and the recording email service."""
    from funshop.core.database import get_session
    from funshop.server.main import app
    from funshop.server.services.email import get_email_service

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_email_service] = lambda: email_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def login(client: AsyncClient, user_password: str) -> Callable:
    """Sign the test client in as the given user."""

    async def _login(user, password: str = user_password):
        response = await client.post("/api/v1/auth/login", json={"email": user.email, "password": password})
        assert response.status_code == 200, response.text
        return response

    return _login
