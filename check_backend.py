import os

import requests
import toml

from settings import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT

SECRETS_PATH = ".streamlit/secrets.toml"


def get_base_url():
    try:
        config = toml.load(SECRETS_PATH)
        url = config.get("API_BASE_URL")
    except (OSError, toml.TomlDecodeError) as e:
        print(f"Error reading secrets: {e}")
        url = None
    return (url or os.getenv("API_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/")


def check_backend():
    """Ping the public movie list; returns True when the backend answers 2xx."""
    base_url = get_base_url()
    print(f"🔎 Checking {base_url}/movies")
    try:
        resp = requests.get(f"{base_url}/movies", timeout=DEFAULT_REQUEST_TIMEOUT)
    except requests.RequestException as e:
        print(f"❌ Backend not reachable: {e}")
        return False

    if resp.status_code == 401:
        print("⛔ Backend is up, /movies requires a token")
        return True
    if not resp.ok:
        print(f"❌ Error {resp.status_code}: {resp.text[:200]}")
        return False

    try:
        movies = resp.json()
    except ValueError:
        print("❌ Response is not JSON")
        return False
    print(f"✅ Backend is up, {len(movies)} movies listed")
    return True


if __name__ == "__main__":
    raise SystemExit(0 if check_backend() else 1)
