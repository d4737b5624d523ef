"""
Tests for user endpoints.

This module contains tests for registration, weather lookup, history and
account activation.
"""

from zipweather.config import settings

USERS_URL = f"{settings.API_V1_STR}/users"


def register(client, email):
    return client.post(f"{USERS_URL}/register", json={"email": email})


def lookup(client, email, zip_code):
    return client.get(f"{USERS_URL}/weather", params={"email": email, "zipCode": zip_code})


# Registration

def test_register_new_user(client):
    """Test user registration with valid data."""
    response = register(client, "newuser@example.com")
    assert response.status_code == 200
    assert response.json() == "User registered successfully"


def test_register_duplicate_email(client):
    """Test that registering with duplicate email fails with a conflict."""
    register(client, "duplicate@example.com")

    response = register(client, "duplicate@example.com")
    assert response.status_code == 409
    assert response.json()["detail"] == "Already user registered"


def test_register_invalid_email(client):
    """Test registration with an email lacking '@'."""
    response = register(client, "notanemail")
    assert response.status_code == 400
    assert response.json()["detail"] == "Email is invalid"


def test_register_missing_email(client):
    """Test registration without an email field."""
    response = client.post(f"{USERS_URL}/register", json={})
    assert response.status_code == 422


# Weather lookup

def test_weather_for_unregistered_user(client, provider):
    """Test that an unknown email is rejected without calling the provider."""
    response = lookup(client, "ghost@example.com", "12345")

    assert response.status_code == 400
    data = response.json()
    assert data["weatherDetails"] == "User not found. Please register and then use the API."
    assert data["email"] is None
    assert provider.call_count == 0


def test_weather_for_inactive_user(client, provider):
    """Test that an inactive user is forbidden without calling the provider."""
    register(client, "inactive@example.com")
    client.post(f"{USERS_URL}/deactivate", params={"email": "inactive@example.com"})

    response = lookup(client, "inactive@example.com", "12345")

    assert response.status_code == 403
    assert response.json()["weatherDetails"] == "User is inactive. Please activate your account to use the API."
    assert provider.call_count == 0


def test_weather_with_invalid_zip(client, provider):
    """Test that a malformed ZIP code returns 400 with an empty body."""
    register(client, "zip@example.com")

    response = lookup(client, "zip@example.com", "1234")

    assert response.status_code == 400
    assert response.content == b""
    assert provider.call_count == 0


def test_weather_success(client, provider):
    """Test a successful lookup returns the raw payload and logs it."""
    register(client, "weather@example.com")

    response = lookup(client, "weather@example.com", "90210")

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "weather@example.com"
    assert data["zipCode"] == "90210"
    assert data["weatherDetails"] == provider.body
    assert data["timestamp"].endswith(("Z", "+00:00"))
    assert provider.call_count == 1
    assert provider.requests[0].url.params["zip"] == "90210"
    assert provider.requests[0].url.params["appid"] == "test-app-id"
    assert provider.requests[0].url.params["units"] == "imperial"

    history = client.get(f"{USERS_URL}/history", params={"email": "weather@example.com"}).json()
    assert len(history) == 1
    assert history[0]["weatherDetails"] == provider.body


def test_weather_zip_plus_four(client, provider):
    """Test that ZIP+4 codes are accepted and passed through unchanged."""
    register(client, "zip4@example.com")

    response = lookup(client, "zip4@example.com", "12345-6789")

    assert response.status_code == 200
    assert response.json()["zipCode"] == "12345-6789"
    assert provider.requests[0].url.params["zip"] == "12345-6789"


def test_weather_with_non_ascii_zip(client, provider):
    """Test that non-ASCII digits or spaces in the ZIP code are rejected."""
    register(client, "unicode@example.com")

    for zip_code in ["\u0661\u0662\u0663\u0664\u0665", "12345\u00a06789"]:
        response = lookup(client, "unicode@example.com", zip_code)
        assert response.status_code == 400
        assert response.content == b""

    assert provider.call_count == 0
    assert client.get(f"{USERS_URL}/history").json() == []


def test_weather_provider_error(client, provider):
    """Test that a provider error is reported and nothing is logged."""
    register(client, "fail@example.com")
    provider.status_code = 404
    provider.body = '{"cod": "404", "message": "city not found"}'

    response = lookup(client, "fail@example.com", "00000")

    assert response.status_code == 500
    assert response.json()["detail"] == "Error fetching weather data: city not found"
    assert response.json()["status_code"] == 500
    assert client.get(f"{USERS_URL}/history").json() == []


# History

def test_history_empty(client):
    """Test that history on an empty store is an empty list."""
    response = client.get(f"{USERS_URL}/history", params={"zipCode": "12345", "email": "a@b.com"})
    assert response.status_code == 200
    assert response.json() == []


def test_history_or_filter(client, provider):
    """Test that history matches entries on zip code OR email."""
    register(client, "a@b.com")
    register(client, "c@d.com")
    lookup(client, "a@b.com", "12345")
    lookup(client, "a@b.com", "90210")
    lookup(client, "c@d.com", "12345")
    lookup(client, "c@d.com", "10001")

    response = client.get(f"{USERS_URL}/history", params={"zipCode": "12345", "email": "a@b.com"})

    assert response.status_code == 200
    pairs = [(entry["email"], entry["zipCode"]) for entry in response.json()]
    assert pairs == [("a@b.com", "12345"), ("a@b.com", "90210"), ("c@d.com", "12345")]

    everything = client.get(f"{USERS_URL}/history").json()
    assert len(everything) == 4


# Activation

def test_activate_already_active_user(client):
    """Test that activating an active user still succeeds."""
    register(client, "active@example.com")

    response = client.post(f"{USERS_URL}/activate", params={"email": "active@example.com"})
    assert response.status_code == 200
    assert response.json() == "User activated successfully"

    response = client.post(f"{USERS_URL}/activate", params={"email": "active@example.com"})
    assert response.status_code == 200


def test_deactivate_and_reactivate(client, provider):
    """Test that a reactivated user can query weather again."""
    register(client, "cycle@example.com")

    response = client.post(f"{USERS_URL}/deactivate", params={"email": "cycle@example.com"})
    assert response.status_code == 200
    assert response.json() == "User deactivated successfully"
    assert lookup(client, "cycle@example.com", "12345").status_code == 403

    client.post(f"{USERS_URL}/activate", params={"email": "cycle@example.com"})
    assert lookup(client, "cycle@example.com", "12345").status_code == 200


def test_activate_unknown_user(client):
    """Test that activating an unknown email returns 404."""
    response = client.post(f"{USERS_URL}/activate", params={"email": "ghost@example.com"})
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"

    response = client.post(f"{USERS_URL}/deactivate", params={"email": "ghost@example.com"})
    assert response.status_code == 404
