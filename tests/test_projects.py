import pytest

from bureau.modules.projects import InvalidProjectImagesError, ProjectImage
from bureau.modules.projects.service import normalize_images


def _payload(title="Booking Platform", **overrides):
    payload = {
        "title": title,
        "description": "Online booking for a chain of yoga studios.",
        "category": "Full-Stack",
        "technologies": ["FastAPI", "React"],
        "features": ["Scheduling", "Payments"],
        "images": [
            {"url": "https://cdn.bureau.test/one.png", "alt": "Dashboard"},
            {"url": "https://cdn.bureau.test/two.png", "alt": "Calendar"},
        ],
        "status": "active",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def headers(admin, auth_headers):
    return auth_headers(admin)


async def _create(client, headers, **overrides):
    response = await client.post("/api/projects", json=_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_first_image_becomes_primary():
    images = normalize_images([ProjectImage("https://a", "a"), ProjectImage("https://b", "b")])

    assert [image.is_primary for image in images] == [True, False]


def test_explicit_primary_is_kept():
    images = normalize_images([ProjectImage("https://a", "a"), ProjectImage("https://b", "b", is_primary=True)])

    assert [image.is_primary for image in images] == [False, True]


def test_two_primary_images_are_rejected():
    with pytest.raises(InvalidProjectImagesError):
        normalize_images([ProjectImage("https://a", "a", True), ProjectImage("https://b", "b", True)])


async def test_create_requires_admin(client):
    response = await client.post("/api/projects", json=_payload())

    assert response.status_code == 401


async def test_create_marks_primary_image(client, headers):
    project = await _create(client, headers)

    assert project["images"][0]["is_primary"] is True
    assert project["images"][1]["is_primary"] is False
    assert project["created_at"] is not None


async def test_create_rejects_multiple_primary_images(client, headers):
    images = [
        {"url": "https://cdn.bureau.test/one.png", "alt": "One", "is_primary": True},
        {"url": "https://cdn.bureau.test/two.png", "alt": "Two", "is_primary": True},
    ]

    response = await client.post("/api/projects", json=_payload(images=images), headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Only one image can be marked as primary"


async def test_create_validates_payload(client, headers):
    response = await client.post(
        "/api/projects",
        json=_payload(category="Blockchain", images=[]),
        headers=headers,
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"category", "images"} <= fields


async def test_public_listing_hides_drafts_and_archived(client, headers):
    await _create(client, headers, title="Live Site", status="active")
    await _create(client, headers, title="Shipped App", status="completed")
    draft = await _create(client, headers, title="Work In Progress", status="draft")
    await _create(client, headers, title="Old Portal", status="archived")

    listing = await client.get("/api/projects")
    titles = {item["title"] for item in listing.json()["data"]}
    assert titles == {"Live Site", "Shipped App"}

    hidden = await client.get(f"/api/projects/{draft['id']}")
    assert hidden.status_code == 404
    assert hidden.json()["message"] == "Project not found"

    admin_listing = await client.get("/api/projects/admin/all", headers=headers)
    assert admin_listing.json()["data"]["pagination"]["total"] == 4


async def test_showcase_order_and_category_filter(client, headers):
    await _create(client, headers, title="Third Place", order=2)
    await _create(client, headers, title="Featured Work", featured=True, order=5)
    await _create(client, headers, title="Second Place", order=1)
    await _create(client, headers, title="Mobile Wallet", category="Mobile", order=0)

    listing = await client.get("/api/projects")
    assert [item["title"] for item in listing.json()["data"]] == [
        "Featured Work",
        "Mobile Wallet",
        "Second Place",
        "Third Place",
    ]

    mobile = await client.get("/api/projects", params={"category": "Mobile"})
    assert [item["title"] for item in mobile.json()["data"]] == ["Mobile Wallet"]

    everything = await client.get("/api/projects", params={"category": "All"})
    assert len(everything.json()["data"]) == 4

    featured = await client.get("/api/projects", params={"featured": "true"})
    assert [item["title"] for item in featured.json()["data"]] == ["Featured Work"]


async def test_featured_is_capped(client, headers):
    for index in range(8):
        await _create(client, headers, title=f"Featured {index}", featured=True, order=index)

    response = await client.get("/api/projects/featured")

    assert [item["title"] for item in response.json()["data"]] == [f"Featured {index}" for index in range(6)]


async def test_categories_with_counts(client, headers):
    await _create(client, headers, title="Api Gateway", category="Backend")
    await _create(client, headers, title="Billing Service", category="Backend")
    await _create(client, headers, title="Landing Page", category="Frontend")
    await _create(client, headers, title="Private Draft", category="Design", status="draft")

    response = await client.get("/api/projects/categories")

    assert response.json()["data"] == [
        {"category": "All", "count": 3},
        {"category": "Backend", "count": 2},
        {"category": "Frontend", "count": 1},
    ]


async def test_update_and_delete(client, headers):
    project = await _create(client, headers)
    images = [
        {"url": "https://cdn.bureau.test/one.png", "alt": "Dashboard"},
        {"url": "https://cdn.bureau.test/three.png", "alt": "Reports", "is_primary": True},
    ]

    updated = await client.put(
        f"/api/projects/{project['id']}",
        json=_payload(title="Booking Platform v2", images=images, featured=True),
        headers=headers,
    )
    assert updated.status_code == 200
    data = updated.json()["data"]
    assert data["title"] == "Booking Platform v2"
    assert data["featured"] is True
    assert [image["is_primary"] for image in data["images"]] == [False, True]

    public = await client.get(f"/api/projects/{project['id']}")
    assert public.json()["data"]["title"] == "Booking Platform v2"

    deleted = await client.delete(f"/api/projects/{project['id']}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Project deleted successfully"

    assert (await client.get(f"/api/projects/{project['id']}")).status_code == 404
    assert (await client.delete(f"/api/projects/{project['id']}", headers=headers)).status_code == 404


async def test_update_unknown_project(client, headers):
    response = await client.put("/api/projects/missing", json=_payload(), headers=headers)

    assert response.status_code == 404
