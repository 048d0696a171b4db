from tests.helpers import create_tutor_in_db


def test_search_tutors_endpoint(client, db_session):
    a = create_tutor_in_db(db_session, skill="Math, Physics", hourly_rate=50, average_rating=4.5)
    b = create_tutor_in_db(db_session, skill="Mathematics", hourly_rate=30, average_rating=4.8)
    create_tutor_in_db(db_session, skill="English", hourly_rate=20, average_rating=5.0)

    r = client.get("/tutors", params={"skill": "math", "sort_by": "rating"})

    assert r.status_code == 200, r.text
    body = r.json()
    assert [t["id"] for t in body["data"]["tutors"]] == [b.id, a.id]
    assert body["data"]["available_skills"] == ["English", "Math", "Mathematics", "Physics"]
    assert body["meta"]["count"] == 2


def test_invalid_query_values_are_ignored(client, db_session):
    create_tutor_in_db(db_session, skill="Math", hourly_rate=50)

    r = client.get("/tutors", params={"min_price": "abc", "max_price": "-1", "min_rating": "", "sort_by": "???"})

    assert r.status_code == 200
    assert r.json()["meta"]["count"] == 1


def test_skills_endpoint(client, db_session):
    create_tutor_in_db(db_session, skill="Math, Art")

    r = client.get("/tutors/skills")
    assert r.json()["data"] == ["Art", "Math"]


def test_tutor_details_endpoint(client, db_session):
    t = create_tutor_in_db(db_session, skill="Math", first_name="Ada", last_name="Lovelace")

    r = client.get(f"/tutors/{t.id}")
    assert r.status_code == 200
    assert r.json()["data"]["full_name"] == "Ada Lovelace"

    assert client.get("/tutors/99999").status_code == 404
