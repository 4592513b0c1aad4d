from infrastructure.http.errors import tagged


@tagged("login")
def login(client, identifier, password):
    """POST /auth/login. The backend expects the identifier under `usernameOrEmail`."""
    return client.post("/auth/login", {
        "usernameOrEmail": identifier,
        "password": password,
    })


@tagged("register")
def register(client, payload):
    return client.post("/auth/register", payload)
