import pytest


@pytest.fixture
def valid_theme_data():
    return {
        "title": "Lunar New Year ao dai",
        "description": "Red and gold, lanterns and peach blossoms",
        "recommendLocation": "Temple of Literature",
        "images": [],
    }


def test_list_plans_covers_every_month(client):
    response = client.get("/themes/")

    assert response.status_code == 200
    data = response.json()
    assert [p["month"] for p in data] == list(range(1, 13))
    assert all(p["themes"] == [] for p in data)


def test_add_theme_creates_month_plan(client, valid_theme_data):
    response = client.post("/themes/3", json=valid_theme_data)

    assert response.status_code == 201
    theme = response.json()
    assert theme["title"] == valid_theme_data["title"]
    assert len(theme["id"]) > 0

    plan = client.get("/themes/3").json()
    assert plan["month"] == 3
    assert [t["id"] for t in plan["themes"]] == [theme["id"]]


def test_one_plan_per_month(client, valid_theme_data):
    client.post("/themes/1", json=valid_theme_data)
    valid_theme_data["title"] = "Snowless winter"
    client.post("/themes/1", json=valid_theme_data)

    data = client.get("/themes/").json()
    january = [p for p in data if p["month"] == 1]
    assert len(january) == 1
    assert [t["title"] for t in january[0]["themes"]] == [
        "Lunar New Year ao dai",
        "Snowless winter",
    ]


def test_update_theme(client, valid_theme_data):
    theme_id = client.post("/themes/5", json=valid_theme_data).json()["id"]
    valid_theme_data["title"] = "Summer ao dai"

    response = client.put(f"/themes/5/{theme_id}", json=valid_theme_data)

    assert response.status_code == 200
    assert response.json() == {**valid_theme_data, "id": theme_id}
    assert client.get("/themes/5").json()["themes"][0]["title"] == "Summer ao dai"


def test_update_unknown_theme(client, valid_theme_data):
    response = client.put("/themes/5/missing", json=valid_theme_data)
    assert response.status_code == 404


def test_delete_theme(client, valid_theme_data):
    theme_id = client.post("/themes/8", json=valid_theme_data).json()["id"]

    assert client.delete(f"/themes/8/{theme_id}").status_code == 204
    assert client.delete(f"/themes/8/{theme_id}").status_code == 204
    assert client.get("/themes/8").json()["themes"] == []


@pytest.mark.parametrize("month", [0, 13])
def test_month_out_of_range(client, valid_theme_data, month):
    assert client.post(f"/themes/{month}", json=valid_theme_data).status_code == 422


def test_theme_requires_title(client, valid_theme_data):
    valid_theme_data["title"] = ""
    assert client.post("/themes/2", json=valid_theme_data).status_code == 422
