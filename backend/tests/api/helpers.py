"""Shared request helpers for API route tests."""

API = "/v1"


async def create_users(client, count: int) -> list[dict]:
    """Create `count` users named user0..userN-1, returning their bodies."""
    users = []
    for i in range(count):
        res = await client.post(f"{API}/users", json={
            "username": f"user{i}",
            "email": f"user{i}@example.com",
            "passwordHash": "h",
        })
        assert res.status_code == 201, res.text
        users.append(res.json())
    return users
