"""
Tests d'intégration de l'API avec le backend SQL (SQLite fichier).
"""

from pathlib import Path

from src.config import Settings


def _sql_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "repository_backend": "sql",
        "database_url": f"sqlite:///{tmp_path}/api.db",
        "seed_demo_data": False,
        "log_file": tmp_path / "test.log",
    }
    values.update(overrides)
    return Settings(**values)


class TestSqlBackendApi:
    """Le même contrat HTTP, servi par la table movies."""

    def test_crud_cycle(self, make_client, tmp_path):
        client = make_client(_sql_settings(tmp_path))

        resp = client.post("/movies", json={"name": "Latte", "price": 2.45})
        assert resp.status_code == 200
        assert resp.json()["id"] == 1
        assert resp.json()["price"] == 2.45

        client.post("/movies", json={"name": "Esspresso", "price": 1.99})
        assert client.put("/movies", json={"id": 2, "name": "Ristretto", "price": 2}).status_code == 204
        assert client.delete("/movies/1").status_code == 204

        movies = client.get("/movies").json()
        assert [(m["id"], m["name"]) for m in movies] == [(2, "Ristretto")]
        assert client.get("/health").json()["backend"] == "sql"

    def test_data_survives_restart(self, make_client, tmp_path):
        first = make_client(_sql_settings(tmp_path))
        first.post("/movies", json={"name": "Latte", "price": 2.45})

        second = make_client(_sql_settings(tmp_path))
        assert [m["name"] for m in second.get("/movies").json()] == ["Latte"]

    def test_seeding_only_on_empty_table(self, make_client, tmp_path):
        make_client(_sql_settings(tmp_path, seed_demo_data=True))
        again = make_client(_sql_settings(tmp_path, seed_demo_data=True))
        assert len(again.get("/movies").json()) == 2
