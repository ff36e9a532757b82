def test_health_endpoints(client):
    assert client.get("/api/health").json() == {"status": "ok"}

    ready = client.get("/api/health/ready")
    assert ready.status_code == 200
    assert ready.json()["database"]["ok"] is True


def test_catalog_listings(client):
    branches = client.get("/api/branches")
    assert branches.status_code == 200
    assert [item["name"] for item in branches.json()] == ["CSE", "ECE", "CSM"]

    semesters = client.get("/api/semesters").json()
    assert [item["number"] for item in semesters] == list(range(1, 9))

    assert [item["name"] for item in client.get("/api/sections").json()] == ["A", "B", "C"]
    assert len(client.get("/api/subjects").json()) == 33


def test_timetable_slots_by_variant(client):
    sem1 = client.get("/api/timetable-slots/sem1").json()
    assert len(sem1) == 9
    assert sem1[3]["name"] == "LUNCH BREAK "
    assert sem1[0]["semester_type"] == "sem1"

    assert client.get("/api/timetable-slots/weekend").json() == []


def test_timetable_endpoint_shape(client):
    response = client.get("/api/timetable/CSE/6/A")
    assert response.status_code == 200

    payload = response.json()
    assert set(payload) == {"timetable", "subjectDetails", "slots"}
    assert payload["timetable"]["Monday"][0] == "Machine Learning"
    assert payload["subjectDetails"]["Cloud Computing"] == {
        "code": "23A37501T",
        "name": "Cloud Computing",
        "faculty": "K. Kishore Kumar",
    }
    assert [slot["name"] for slot in payload["slots"]][2] == "tea Break"


def test_unknown_branch_returns_not_found(client):
    response = client.get("/api/timetable/XXX/6/A")

    assert response.status_code == 404
    assert response.json() == {"error": "Branch not found", "details": {"entity": "branch"}}


def test_non_numeric_semester_is_rejected(client):
    assert client.get("/api/timetable/CSE/six/A").status_code == 422


def test_out_of_range_semester_is_rejected(client):
    huge = "99999999999999999999"

    assert client.get(f"/api/timetable/CSE/{huge}/A").status_code == 422
    assert client.get(f"/api/syllabus/CSE/{huge}").status_code == 422
    assert client.get("/api/timetable/CSE/0/A").status_code == 422


def test_papers_are_ordered_by_semester_then_year(client):
    response = client.get("/api/papers/CSE")
    assert response.status_code == 200

    papers = response.json()
    assert len(papers) == 10
    assert papers[0] == {"title": "Data Structures", "year": 2022, "semester": 3}
    assert [paper["semester"] for paper in papers] == sorted(paper["semester"] for paper in papers)

    assert client.get("/api/papers/ECE").json() == []
    assert client.get("/api/papers/XXX").status_code == 404


def test_syllabus_endpoint(client):
    response = client.get("/api/syllabus/CSE/1")
    assert response.status_code == 200
    payload = response.json()
    assert payload["title"] == "CSE - Semester 1 Syllabus"
    assert len(payload["sections"]) == 3

    missing = client.get("/api/syllabus/CSE/4")
    assert missing.status_code == 404
    assert missing.json()["details"] == {"entity": "syllabus"}
