from bureau.core.config import MailSettings
from bureau.core.rate_limit import RateLimitConfig, RateLimiter
from bureau.modules.contacts import CONFIRMATION_SUBJECT, Contact, ContactMailer

from .conftest import RecordingTransport

SUBMISSION = {
    "name": "Ada Lovelace",
    "email": "Ada@Example.com",
    "company": "Analytical Engines",
    "project_type": "Web Application",
    "budget": "$10,000 - $25,000",
    "timeline": "1 month",
    "message": "We would like a new booking platform for our studio.",
}


async def _submit(client, **overrides):
    return await client.post("/api/contact", json={**SUBMISSION, **overrides})


async def test_submit_contact(client, mail_transport):
    response = await _submit(client)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Thank you for your message! We'll get back to you within 24 hours."
    assert body["data"]["id"]

    subjects = sorted(message["Subject"] for message in mail_transport.messages)
    assert subjects == sorted([CONFIRMATION_SUBJECT, "New Project Inquiry from Ada Lovelace"])


async def test_duplicate_submission_is_rejected_within_window(client, clock):
    assert (await _submit(client)).status_code == 201

    duplicate = await _submit(client, email="ada@example.com")
    assert duplicate.status_code == 429
    assert duplicate.json()["success"] is False

    clock.advance(minutes=61)
    assert (await _submit(client)).status_code == 201


async def test_submissions_are_throttled_per_client_ip(client):
    for index in range(3):
        response = await _submit(client, email=f"lead{index}@example.com")
        assert response.status_code == 201

    blocked = await _submit(client, email="lead3@example.com")
    assert blocked.status_code == 429
    assert blocked.json() == {
        "success": False,
        "message": "Too many contact form submissions. Please try again in 15 minutes.",
    }
    assert blocked.headers["retry-after"] == "900"

    other = await client.post(
        "/api/contact",
        json={**SUBMISSION, "email": "lead4@example.com"},
        headers={"X-Forwarded-For": "203.0.113.7"},
    )
    assert other.status_code == 201


def test_rate_limiter_window_slides():
    now = [0.0]
    limiter = RateLimiter(RateLimitConfig(calls=2, window=60), timer=lambda: now[0])

    assert limiter.check("10.0.0.1") == (True, 1)
    limiter.record("10.0.0.1")
    now[0] = 30.0
    limiter.record("10.0.0.1")
    assert limiter.check("10.0.0.1") == (False, 0)
    assert limiter.check("10.0.0.2") == (True, 1)

    now[0] = 61.0
    assert limiter.check("10.0.0.1") == (True, 0)

    limiter.reset()
    assert limiter.check("10.0.0.1") == (True, 1)


async def test_submit_rejects_invalid_payload(client):
    response = await _submit(client, email="not-an-email", message="short")

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"email", "message"} <= fields


async def test_submit_accepts_blank_options(client):
    response = await _submit(client, project_type="", budget="", timeline="", company=None)

    assert response.status_code == 201


async def test_admin_endpoints_require_token(client):
    assert (await client.get("/api/contact")).status_code == 401
    assert (await client.get("/api/contact/stats")).status_code == 401


async def test_list_update_and_stats(client, admin, auth_headers):
    await _submit(client)
    await _submit(client, email="grace@example.com", name="Grace Hopper")
    headers = auth_headers(admin)

    listing = await client.get("/api/contact", params={"limit": 1}, headers=headers)
    assert listing.status_code == 200
    data = listing.json()["data"]
    assert data["pagination"] == {"page": 1, "limit": 1, "total": 2, "pages": 2}
    contact_id = data["contacts"][0]["id"]

    updated = await client.put(
        f"/api/contact/{contact_id}/status",
        json={"status": "contacted", "notes": "Called on Monday"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "contacted"
    assert updated.json()["data"]["notes"] == "Called on Monday"

    filtered = await client.get("/api/contact", params={"status": "contacted"}, headers=headers)
    assert [item["id"] for item in filtered.json()["data"]["contacts"]] == [contact_id]

    stats = (await client.get("/api/contact/stats", headers=headers)).json()["data"]
    assert stats["total"] == 2
    assert stats["this_month"] == 2
    assert stats["by_status"] == {"new": 1, "contacted": 1}


async def test_update_status_of_unknown_contact(client, admin, auth_headers):
    response = await client.put(
        "/api/contact/missing/status",
        json={"status": "closed"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Contact not found"


def _contact(**overrides) -> Contact:
    values = dict(
        id="c1",
        name="Ada Lovelace",
        email="ada@example.com",
        message="We would like a new booking platform.",
    )
    values.update(overrides)
    return Contact(**values)


def test_notification_message_fields():
    mailer = ContactMailer(RecordingTransport(), MailSettings(admin_email="inbox@bureau.test"))

    message = mailer.notification_message(_contact(company=None, budget="$50,000+"))

    assert message["To"] == "inbox@bureau.test"
    assert message["Reply-To"] == "ada@example.com"
    assert message["From"] == "Bureau Engine <no-reply@bureau-engine.local>"
    body = message.get_content()
    assert "Company: Not specified" in body
    assert "Budget: $50,000+" in body


def test_notification_without_recipient_is_skipped():
    mailer = ContactMailer(RecordingTransport(), MailSettings())

    assert mailer.notification_message(_contact()) is None


async def test_delivery_failures_are_contained():
    class BrokenTransport:
        async def send(self, message):
            raise ConnectionError("smtp unavailable")

    mailer = ContactMailer(BrokenTransport(), MailSettings(admin_email="inbox@bureau.test"))

    await mailer.deliver_submission_emails(_contact())
