# /tests/test_showcase_api.py

import os
from datetime import datetime, timezone

import pytest


def _achievement_form(**overrides):
    form = {"studentName": "Madina", "age": "17", "title": "IELTS", "level": "7.5"}
    form.update(overrides)
    return form


def _graduate_form(**overrides):
    form = {
        "firstName": "Jasur", "lastName": "Karimov", "admissionType": "grant",
        "field": "Computer Science", "university": "INHA", "admissionYear": "2024",
    }
    form.update(overrides)
    return form


# --- Achievements ---

def test_create_achievement_defaults(client):
    response = client.post("/api/achievements", data=_achievement_form(group=""))

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["id"].startswith("ach_")
    assert data["achievementType"] == "certificate"
    assert data["isPublished"] is True
    assert data["group"] is None
    assert data["school"] == ""


def test_achievement_age_out_of_range_is_400(client):
    assert client.post("/api/achievements", data=_achievement_form(age="3")).status_code == 400


def test_achievement_with_unknown_group_is_400(client):
    response = client.post("/api/achievements", data=_achievement_form(group="grp_missing"))
    assert response.status_code == 400
    assert response.json()["detail"] == "Group not found"


def test_achievement_publish_filter_and_toggle(client, group):
    first = client.post("/api/achievements", data=_achievement_form(group=group["id"])).json()
    client.post("/api/achievements", data=_achievement_form(title="SAT", level="1500"))

    toggled = client.patch(f"/api/achievements/{first['id']}/publish")
    assert toggled.json()["isPublished"] is False

    published = client.get("/api/achievements", params={"published": "true"}).json()
    assert [a["title"] for a in published["data"]] == ["SAT"]

    by_group = client.get("/api/achievements", params={"groupId": group["id"]}).json()
    assert by_group["pagination"]["totalItems"] == 1


def test_update_achievement_keeps_date_when_not_given(client):
    created = client.post(
        "/api/achievements", data=_achievement_form(achievementDate="2024-05-01T00:00:00")
    ).json()

    updated = client.put(f"/api/achievements/{created['id']}", data=_achievement_form(level="8.0"))

    assert updated.status_code == 200
    assert updated.json()["level"] == "8.0"
    assert updated.json()["achievementDate"].startswith("2024-05-01")


def test_delete_achievement_removes_image(client, png_bytes, test_settings):
    created = client.post(
        "/api/achievements",
        data=_achievement_form(),
        files={"image": ("cert.png", png_bytes, "image/png")},
    ).json()
    stored = os.path.join(test_settings.UPLOAD_DIR, created["imageUrl"][len("/uploads/"):])
    assert os.path.isfile(stored)

    response = client.delete(f"/api/achievements/{created['id']}")

    assert response.json() == {"message": "Achievement deleted successfully"}
    assert not os.path.exists(stored)
    assert client.get(f"/api/achievements/{created['id']}").status_code == 404


# --- Graduates ---

def test_create_graduate_populates_previous_group(client, group):
    response = client.post("/api/graduates", data=_graduate_form(previousGroup=group["id"], finalScore=""))

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["fullName"] == "Jasur Karimov"
    assert data["previousGroup"]["id"] == group["id"]
    assert data["finalScore"] is None
    assert data["isPublished"] is True


@pytest.mark.parametrize("overrides", [
    {"admissionYear": "1999"},
    {"admissionYear": str(datetime.now(timezone.utc).year + 6)},
    {"graduationYear": "2014"},
    {"finalScore": "101"},
    {"admissionType": "scholarship"},
])
def test_graduate_validation_errors_are_400(client, overrides):
    assert client.post("/api/graduates", data=_graduate_form(**overrides)).status_code == 400


def test_graduate_filters(client):
    client.post("/api/graduates", data=_graduate_form())
    client.post("/api/graduates", data=_graduate_form(admissionType="contract", field="Medicine"))
    hidden = client.post("/api/graduates", data=_graduate_form(isPublished="false")).json()
    assert hidden["isPublished"] is False

    contract = client.get("/api/graduates", params={"admissionType": "contract"}).json()
    assert [g["field"] for g in contract["data"]] == ["Medicine"]

    # An unknown admission type is ignored rather than rejected.
    everything = client.get("/api/graduates", params={"admissionType": "other"}).json()
    assert everything["pagination"]["totalItems"] == 3

    computer = client.get("/api/graduates", params={"field": "computer", "published": "true"}).json()
    assert computer["pagination"]["totalItems"] == 1


def test_graduate_update_toggle_delete(client):
    created = client.post("/api/graduates", data=_graduate_form()).json()

    updated = client.put(f"/api/graduates/{created['id']}", data=_graduate_form(university="WIUT"))
    assert updated.json()["university"] == "WIUT"

    toggled = client.patch(f"/api/graduates/{created['id']}/publish")
    assert toggled.json()["isPublished"] is False

    assert client.delete(f"/api/graduates/{created['id']}").status_code == 200
    assert client.get(f"/api/graduates/{created['id']}").status_code == 404
    assert client.patch(f"/api/graduates/{created['id']}/publish").status_code == 404
