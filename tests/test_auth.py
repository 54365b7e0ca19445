from conftest import login_headers


def test_login_with_seeded_account(client):
    res = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert res.status_code == 200
    body = res.json()
    assert body["token"]
    assert body["user"]["username"] == "admin"
    assert "password" not in body["user"]
    assert "hashed_password" not in body["user"]


def test_login_accepts_email_in_username_field(client):
    res = client.post(
        "/api/auth/login", json={"username": "admin@example.com", "password": "admin123"}
    )
    assert res.status_code == 200
    assert res.json()["user"]["email"] == "admin@example.com"


def test_wrong_password_and_unknown_account_look_the_same(client):
    wrong = client.post("/api/auth/login", json={"username": "admin", "password": "nope123"})
    unknown = client.post("/api/auth/login", json={"username": "ghost", "password": "nope123"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"error": "invalid credentials"}


def test_login_missing_fields_is_400(client):
    res = client.post("/api/auth/login", json={})
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["details"]}
    assert fields == {"username", "password"}

    res = client.post("/api/auth/login", json={"username": "", "password": ""})
    assert res.status_code == 400


def test_register_returns_token_and_user(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "new_user", "email": "new@example.com", "password": "password123"},
    )

    assert res.status_code == 201
    body = res.json()
    assert body["token"]
    assert body["user"]["username"] == "new_user"
    assert body["user"]["email"] == "new@example.com"
    assert "password" not in body["user"]

    # el token recién emitido sirve para rutas privadas
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "new_user"


def test_register_duplicate_username_is_409_and_keeps_row(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "admin", "email": "other@example.com", "password": "password123"},
    )
    assert res.status_code == 409
    assert "error" in res.json()

    # la cuenta original sigue igual
    headers = login_headers(client, "admin", "admin123")
    me = client.get("/api/auth/me", headers=headers).json()
    assert me["email"] == "admin@example.com"
    assert client.post(
        "/api/auth/login", json={"username": "admin", "password": "password123"}
    ).status_code == 401


def test_register_duplicate_email_is_409(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "someone", "email": "admin@example.com", "password": "password123"},
    )
    assert res.status_code == 409


def test_register_is_not_idempotent(client):
    payload = {"username": "twice", "email": "twice@example.com", "password": "password123"}
    assert client.post("/api/auth/register", json=payload).status_code == 201
    assert client.post("/api/auth/register", json=payload).status_code == 409


def test_register_short_password_creates_nothing(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "shorty", "email": "shorty@example.com", "password": "12345"},
    )
    assert res.status_code == 400
    assert [d["field"] for d in res.json()["details"]] == ["password"]

    # no quedó fila: el login no encuentra la cuenta
    assert client.post(
        "/api/auth/login", json={"username": "shorty", "password": "12345"}
    ).status_code == 401


def test_register_reports_every_bad_field(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "no spaces!", "email": "not-an-email", "password": "1"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "validation error"
    assert {d["field"] for d in body["details"]} == {"username", "email", "password"}


def test_register_username_length_bounds(client):
    for username in ("ab", "x" * 31):
        res = client.post(
            "/api/auth/register",
            json={"username": username, "email": "len@example.com", "password": "password123"},
        )
        assert res.status_code == 400


def test_login_with_email_exactly_as_registered(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "casey", "email": "Case@Example.COM", "password": "password123"},
    )
    assert res.status_code == 201
    assert res.json()["user"]["email"] == "Case@Example.COM"

    login = client.post(
        "/api/auth/login", json={"username": "Case@Example.COM", "password": "password123"}
    )
    assert login.status_code == 200
    assert login.json()["user"]["username"] == "casey"
