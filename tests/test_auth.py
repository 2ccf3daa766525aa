from datetime import timedelta

from liftlog.services.auth import (
    create_access_token,
    get_user_id_from_token,
    hash_password,
    verify_password,
    verify_token,
)

ACCOUNT = {"email": "Lifter@Example.com", "password": "squat-every-day", "name": "Sam"}


def test_password_hashing():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
    assert not verify_password("correct horse", "not-a-bcrypt-hash")


def test_token_roundtrip_and_expiry():
    token = create_access_token({"sub": "user-123"})
    assert get_user_id_from_token(token) == "user-123"
    assert verify_token(token + "tampered") is None

    expired = create_access_token({"sub": "user-123"}, expires_delta=timedelta(seconds=-5))
    assert verify_token(expired) is None


def test_register_login_and_me(auth_client):
    registered = auth_client.post("/api/auth/register", json=ACCOUNT)
    assert registered.status_code == 201
    user_id = registered.json()["user_id"]

    login = auth_client.post(
        "/api/auth/login",
        json={"email": "lifter@example.com", "password": ACCOUNT["password"]},
    )
    assert login.status_code == 200
    token = login.json()["access_token"]
    assert login.json()["token_type"] == "bearer"

    me = auth_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["user_id"] == user_id
    assert me.json()["email"] == "lifter@example.com"


def test_register_duplicate_email(auth_client):
    assert auth_client.post("/api/auth/register", json=ACCOUNT).status_code == 201
    duplicate = auth_client.post("/api/auth/register", json=ACCOUNT)
    assert duplicate.status_code == 409
    assert duplicate.json() == {"message": "Email already registered"}


def test_register_validation(auth_client):
    short = dict(ACCOUNT, password="short")
    not_email = dict(ACCOUNT, email="not-an-email")
    assert auth_client.post("/api/auth/register", json=short).status_code == 422
    assert auth_client.post("/api/auth/register", json=not_email).status_code == 422


def test_login_with_wrong_password(auth_client):
    auth_client.post("/api/auth/register", json=ACCOUNT)
    response = auth_client.post(
        "/api/auth/login",
        json={"email": ACCOUNT["email"], "password": "bench-every-day"},
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_workouts_require_authentication(auth_client):
    assert auth_client.get("/api/workouts").status_code in (401, 403)
    response = auth_client.get(
        "/api/workouts", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid or expired token"}


def test_token_subject_must_be_a_user_id(auth_client):
    token = create_access_token({"sub": "not-a-uuid"})
    response = auth_client.get(
        "/api/workouts", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid token payload"}


def test_workouts_are_scoped_to_token_owner(auth_client):
    token = auth_client.post("/api/auth/register", json=ACCOUNT).json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}
    created = auth_client.post(
        "/api/workouts",
        json={"exercises": [{"name": "Deadlift", "sets": [{"weight": 140, "reps": 3}]}]},
        headers=headers,
    )
    assert created.status_code == 201

    other = auth_client.post(
        "/api/auth/register",
        json={"email": "other@example.com", "password": "password123", "name": "Alex"},
    ).json()["access_token"]
    listed = auth_client.get("/api/workouts", headers={"Authorization": f"Bearer {other}"})
    assert listed.json() == []
