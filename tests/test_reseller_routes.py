"""HTTP tests for the reseller lost password templates page."""

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.email_template import EmailTemplate, TemplateKind
from app.schemas.common import Identity
from app.services.email_template_service import (
    DEFAULT_TEMPLATES,
    MESSAGE_REQUIRED,
    SUBJECT_REQUIRED,
    TEMPLATES_UPDATED,
    get_lostpassword_activation_email,
    get_lostpassword_email,
)
from conftest import login_as

URL = "/reseller/settings_lostpassword"


def _form(**overrides) -> dict[str, str]:
    data = {
        "uaction": "apply",
        "subject1": "Activate your password",
        "message1": "Hello {NAME}, follow {LINK}",
        "subject2": "Your new password",
        "message2": "Hello {NAME}, it is {PASSWORD}",
    }
    data.update(overrides)
    return data


async def _count_templates(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(EmailTemplate))
    return result.scalar() or 0


class TestAccess:
    async def test_admin_cannot_open_reseller_page(
        self, app, client: AsyncClient, admin_identity: Identity
    ):
        login_as(app, admin_identity)

        response = await client.get(URL)

        assert response.status_code == 303
        assert response.headers["location"] == "/login"


class TestRenderForm:
    async def test_shows_defaults_and_sender(
        self, app, client: AsyncClient, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)

        response = await client.get(URL)

        assert response.status_code == 200
        assert DEFAULT_TEMPLATES[TemplateKind.ACTIVATION][0] in response.text
        assert DEFAULT_TEMPLATES[TemplateKind.LOST_PASSWORD][0] in response.text
        assert "reseller@example.com" in response.text
        assert "Rita Seller" in response.text

    async def test_post_without_apply_only_renders(
        self, app, client: AsyncClient, db: AsyncSession, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)

        response = await client.post(URL, data=_form(uaction="cancel"))

        assert response.status_code == 200
        assert DEFAULT_TEMPLATES[TemplateKind.ACTIVATION][0] in response.text
        assert await _count_templates(db) == 0


class TestSubmitForm:
    async def test_valid_submission_saves_and_rerenders(
        self, app, client: AsyncClient, db: AsyncSession, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)

        response = await client.post(URL, data=_form())

        assert response.status_code == 200
        assert TEMPLATES_UPDATED in response.text
        assert "Activate your password" in response.text
        assert DEFAULT_TEMPLATES[TemplateKind.ACTIVATION][0] not in response.text

        activation = await get_lostpassword_activation_email(db, reseller_identity.user_id)
        lost_password = await get_lostpassword_email(db, reseller_identity.user_id)
        assert activation.subject == "Activate your password"
        assert lost_password.message == "Hello {NAME}, it is {PASSWORD}"

    async def test_later_render_reflects_saved_values(
        self, app, client: AsyncClient, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)
        await client.post(URL, data=_form(subject2="Changed subject"))

        response = await client.get(URL)

        assert "Changed subject" in response.text
        assert TEMPLATES_UPDATED not in response.text

    async def test_invalid_submission_keeps_stored_values(
        self, app, client: AsyncClient, db: AsyncSession, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)
        await client.post(URL, data=_form(subject1="Stored activation", message2="Stored body"))

        response = await client.post(
            URL, data=_form(subject1="Rejected activation", message2="")
        )

        assert MESSAGE_REQUIRED in response.text
        assert TEMPLATES_UPDATED not in response.text
        assert "Rejected activation" in response.text
        assert "Stored activation" not in response.text

        activation = await get_lostpassword_activation_email(db, reseller_identity.user_id)
        lost_password = await get_lostpassword_email(db, reseller_identity.user_id)
        assert activation.subject == "Stored activation"
        assert lost_password.message == "Stored body"

        # A plain render shows the stored values again
        again = await client.get(URL)
        assert "Stored activation" in again.text
        assert "Rejected activation" not in again.text

    async def test_empty_subject_reports_error_and_keeps_input(
        self, app, client: AsyncClient, db: AsyncSession, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)

        response = await client.post(
            URL, data=_form(subject1="", message1="x", subject2="y", message2="z")
        )

        assert response.status_code == 200
        assert SUBJECT_REQUIRED in response.text
        assert MESSAGE_REQUIRED not in response.text
        assert TEMPLATES_UPDATED not in response.text
        assert await _count_templates(db) == 0

    async def test_missing_fields_report_both_errors(
        self, app, client: AsyncClient, db: AsyncSession, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)

        response = await client.post(URL, data={"uaction": "apply"})

        assert SUBJECT_REQUIRED in response.text
        assert MESSAGE_REQUIRED in response.text
        assert await _count_templates(db) == 0

    async def test_submitted_values_are_escaped(
        self, app, client: AsyncClient, reseller_identity: Identity
    ):
        login_as(app, reseller_identity)

        response = await client.post(URL, data=_form(subject1="<b>Bold</b>"))

        assert "&lt;b&gt;Bold&lt;/b&gt;" in response.text
        assert "<b>Bold</b>" not in response.text
