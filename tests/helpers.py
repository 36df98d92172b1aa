"""Catalog fixtures and small API helpers shared by the test modules."""

from app.features.problems.schemas import ProblemSeedRow

TEMPLATE = "neet250.v1"
OTHER_TEMPLATE = "blind75.v1"
CATALOG_SIZE = 20
PASSWORD = "correct-horse-battery"

_DIFFICULTIES = ["Easy", "Medium", "Hard"]


def neet(order_index: int) -> int:
    # catalog ids are offset from order indexes so the two never get mixed up
    return 100 + order_index


def category_for(order_index: int) -> str:
    return "Arrays & Hashing" if order_index <= 12 else "Two Pointers"


def catalog_rows(size: int = CATALOG_SIZE, slug_prefix: str = "problem"):
    return [
        ProblemSeedRow(
            neet250_id=neet(i),
            order_index=i,
            title=f"Problem {i}",
            leetcode_slug=f"{slug_prefix}-{i}",
            category=category_for(i),
            difficulty=_DIFFICULTIES[(i - 1) % 3],
        )
        for i in range(1, size + 1)
    ]


def signup(client, email: str, timezone: str = "UTC") -> dict:
    resp = client.post("/auth/signup", json={"email": email, "password": PASSWORD, "timezone": timezone})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


def default_list_id(client, headers) -> str:
    resp = client.get("/lists", headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()[0]["id"]


def record(client, headers, list_id: str, order_index: int, **body):
    resp = client.post(f"/lists/{list_id}/problems/{neet(order_index)}/attempts", json=body, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


def orders(panel) -> list:
    return [p["orderIndex"] for p in panel]
