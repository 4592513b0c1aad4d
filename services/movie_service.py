from infrastructure.http.errors import tagged


@tagged("get_all_movies")
def get_all_movies(client):
    return client.get("/movies") or []


@tagged("get_movie_by_id")
def get_movie_by_id(client, movie_id):
    return client.get(f"/movies/{movie_id}")


@tagged("create_movie")
def create_movie(client, movie_data):
    """Admin only."""
    return client.post("/movies", movie_data)


@tagged("update_movie")
def update_movie(client, movie_id, movie_data):
    """Admin only."""
    return client.put(f"/movies/{movie_id}", movie_data)


@tagged("delete_movie")
def delete_movie(client, movie_id):
    """Admin only."""
    client.delete(f"/movies/{movie_id}")
