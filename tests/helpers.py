async def register(client, email="test@example.com", password="password123", name="Test"):
    res = await client.post("/users/", json={"name": name, "email": email, "password": password})
    assert res.status_code == 201, res.text
    return res


async def login(client, email="test@example.com", password="password123"):
    res = await client.post("/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["data"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
