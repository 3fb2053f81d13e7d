class TestCompaniesApi:
    def test_create_company(self, client):
        r = client.post("/api/v1/companies", json={
            "handle": "acme",
            "name": "Acme Corp",
            "description": "Anvils",
            "num_employees": 10,
        })
        assert r.status_code == 201
        assert r.json() == {
            "handle": "acme",
            "name": "Acme Corp",
            "description": "Anvils",
            "num_employees": 10,
            "logo_url": None,
        }

    def test_create_duplicate(self, client):
        r = client.post("/api/v1/companies", json={
            "handle": "c1", "name": "Other", "description": "d",
        })
        assert r.status_code == 409

    def test_create_duplicate_name(self, client):
        r = client.post("/api/v1/companies", json={
            "handle": "new", "name": "C1", "description": "d",
        })
        assert r.status_code == 409

    def test_list_companies(self, client):
        r = client.get("/api/v1/companies", params={"min_employees": 2})
        assert r.status_code == 200
        assert [c["handle"] for c in r.json()] == ["c2", "c3"]

    def test_list_min_over_max(self, client):
        r = client.get("/api/v1/companies", params={"min_employees": 3, "max_employees": 1})
        assert r.status_code == 400

    def test_get_company(self, client):
        r = client.get("/api/v1/companies/c2")
        assert r.status_code == 200
        assert [j["title"] for j in r.json()["jobs"]] == ["Job3", "Job4"]

    def test_get_missing(self, client):
        r = client.get("/api/v1/companies/nope")
        assert r.status_code == 404

    def test_update_company(self, client):
        r = client.patch("/api/v1/companies/c1", json={"logo_url": None})
        assert r.status_code == 200
        assert r.json()["logo_url"] is None
        assert r.json()["name"] == "C1"

    def test_update_duplicate_name(self, client):
        r = client.patch("/api/v1/companies/c1", json={"name": "C2"})
        assert r.status_code == 409

    def test_update_handle_forbidden(self, client):
        r = client.patch("/api/v1/companies/c1", json={"handle": "c9"})
        assert r.status_code == 422

    def test_delete_company(self, client):
        r = client.delete("/api/v1/companies/c1")
        assert r.json() == {"deleted": "c1"}

        r = client.get("/api/v1/jobs")
        assert [j["title"] for j in r.json()] == ["Job3", "Job4"]

    def test_health(self, client):
        r = client.get("/health")
        assert r.json()["status"] == "ok"
