QUIZ = {
    "level": "PUC / 11-12",
    "marks": "Above 90%",
    "subjects": ["Math"],
    "interests": ["Tech", "Research"],
    "hobbies": [],
}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_root_redirects_to_docs(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == "/docs"


def test_recommend(client):
    r = client.post("/recommend", json=QUIZ)
    assert r.status_code == 200
    body = r.json()
    assert [s["title"] for s in body["suggestions"]] == ["AI Engineer", "Software Engineer"]
    assert body["suggestions"][0]["path"].startswith("Complete PUC")
    assert body["startup_idea"]["idea"] == "Personalized Learning Platform"


def test_recommend_with_empty_answers(client):
    r = client.post("/recommend", json={"level": "10th", "marks": "Below 70%"})
    assert r.status_code == 200
    assert [s["title"] for s in r.json()["suggestions"]] == ["General Manager", "Project Manager"]


def test_report_payload(client):
    r = client.post("/report/payload", json=QUIZ)
    assert r.status_code == 200
    assert set(r.json()) == {"suggestions", "missing_skills", "startup_idea"}


def test_resume_upload_txt(client):
    files = {"file": ("cv.txt", b"I used Python and React for this project", "text/plain")}
    r = client.post("/resume/upload", files=files)
    assert r.status_code == 200
    body = r.json()
    assert body["filename"] == "cv.txt"
    assert body["report"]["career_title"] == "Frontend Web Developer"


def test_resume_upload_rejects_unsupported_format(client):
    files = {"file": ("cv.docx", b"data", "application/octet-stream")}
    r = client.post("/resume/upload", files=files)
    assert r.status_code == 400


def test_resume_text_and_skill_detection(client):
    r = client.post("/resume/text", json={"text": "Figma wireframe prototypes"})
    assert r.status_code == 200
    assert r.json()["career_title"] == "UI/UX Designer"

    r = client.post("/skills/detect", json={"text": "python and sql"})
    assert r.json() == {"skills": ["Python", "SQL"], "count": 2}


def test_education_roadmap_endpoint(client):
    r = client.get("/roadmap/education", params={"title": "Nonexistent Title", "level": "10th"})
    assert r.status_code == 200
    assert r.json()["stream"] == "Based on career choice"


def test_startup_endpoint(client):
    r = client.post("/roadmap/startup", json={"interests": ["Design", "Business"], "hobbies": []})
    assert r.json()["idea"] == "Custom Design Marketplace for Small Businesses"


def test_skill_resources_endpoint(client):
    r = client.get("/skills/resources", params={"name": "Python"})
    assert r.status_code == 200
    assert r.json()["name"] == "Python"
    assert len(r.json()["links"]) == 5
