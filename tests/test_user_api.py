class TestUserAPI:
    """HTTP contract of the user routes"""

    def test_create_user_success(self, client, sample_user_data):
        response = client.post("/api/user", json=sample_user_data)

        assert response.status_code == 200
        assert response.json() == {"message": "User created successfully"}

        users = client.get("/api/users").json()
        matching = [u for u in users if u["email"] == sample_user_data["email"]]
        assert len(matching) == 1
        assert matching[0]["name"] == "Ann"
        assert matching[0]["address"] == "1 Rd"
        assert matching[0]["id"]

    def test_create_duplicate_email(self, client, sample_user_data):
        client.post("/api/user", json=sample_user_data)

        response = client.post(
            "/api/user",
            json={"name": "Impostor", "email": sample_user_data["email"], "address": "2 Rd"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "User already exists."}
        users = client.get("/api/users").json()
        assert len(users) == 1
        assert users[0]["name"] == "Ann"

    def test_create_missing_field(self, client):
        response = client.post("/api/user", json={"name": "Ann", "email": "ann@x.com"})

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid user data."
        assert any(err["loc"][-1] == "address" for err in data["errors"])
        assert client.get("/api/users").status_code == 404

    def test_create_blank_field(self, client):
        response = client.post(
            "/api/user", json={"name": "   ", "email": "ann@x.com", "address": "1 Rd"}
        )

        assert response.status_code == 400
        assert client.get("/api/users").status_code == 404

    def test_list_empty_store(self, client):
        response = client.get("/api/users")

        assert response.status_code == 404
        assert response.json() == {"message": "User data not found."}

    def test_list_insertion_order(self, client):
        for name in ("Zed", "Amy"):
            client.post(
                "/api/user",
                json={"name": name, "email": f"{name.lower()}@x.com", "address": "Street"},
            )

        response = client.get("/api/users")

        assert response.status_code == 200
        assert [u["name"] for u in response.json()] == ["Zed", "Amy"]

    def test_get_user_by_id(self, client, created_user_id, sample_user_data):
        response = client.get(f"/api/user/{created_user_id}")

        assert response.status_code == 200
        assert response.json() == {"id": created_user_id, **sample_user_data}

    def test_get_unknown_user(self, client):
        response = client.get("/api/user/never-created")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found."}

    def test_update_user(self, client, created_user_id):
        new_data = {"name": "Annie", "email": "annie@x.com", "address": "9 Ave"}

        response = client.put(f"/api/update/user/{created_user_id}", json=new_data)

        assert response.status_code == 200
        assert response.json() == {"message": "User Updated Successfully"}
        fetched = client.get(f"/api/user/{created_user_id}").json()
        assert fetched == {"id": created_user_id, **new_data}

    def test_update_requires_complete_record(self, client, created_user_id, sample_user_data):
        response = client.put(f"/api/update/user/{created_user_id}", json={"name": "Only"})

        assert response.status_code == 400
        fetched = client.get(f"/api/user/{created_user_id}").json()
        assert fetched == {"id": created_user_id, **sample_user_data}

    def test_update_to_existing_email(self, client, created_user_id, sample_user_data):
        client.post("/api/user", json={"name": "Bob", "email": "bob@x.com", "address": "2 Rd"})

        response = client.put(
            f"/api/update/user/{created_user_id}",
            json={"name": "Ann", "email": "bob@x.com", "address": "1 Rd"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "User already exists."}
        fetched = client.get(f"/api/user/{created_user_id}").json()
        assert fetched["email"] == sample_user_data["email"]

    def test_update_unknown_user(self, client, created_user_id, sample_user_data):
        response = client.put(
            "/api/update/user/never-created",
            json={"name": "X", "email": "x@x.com", "address": "X"},
        )

        assert response.status_code == 404
        assert response.json() == {"message": "User not found."}
        users = client.get("/api/users").json()
        assert users == [{"id": created_user_id, **sample_user_data}]

    def test_delete_user(self, client, created_user_id):
        response = client.delete(f"/api/delete/user/{created_user_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        assert client.get(f"/api/user/{created_user_id}").status_code == 404
        assert client.get("/api/users").status_code == 404

    def test_delete_unknown_user(self, client, created_user_id):
        response = client.delete("/api/delete/user/never-created")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found."}
        assert len(client.get("/api/users").json()) == 1

    def test_lifecycle_example(self, client):
        ann = {"name": "Ann", "email": "ann@x.com", "address": "1 Rd"}

        assert client.post("/api/user", json=ann).status_code == 200
        users = client.get("/api/users").json()
        assert len(users) == 1
        user_id = users[0]["id"]

        duplicate = client.post("/api/user", json=ann)
        assert duplicate.status_code == 400
        assert duplicate.json()["message"] == "User already exists."

        deleted = client.delete(f"/api/delete/user/{user_id}")
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "User deleted successfully"

        missing = client.get(f"/api/user/{user_id}")
        assert missing.status_code == 404
        assert missing.json()["message"] == "User not found."
