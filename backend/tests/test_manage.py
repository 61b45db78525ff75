"""Tests for the management CLI."""
import pytest

from warranty_tracker import manage
from warranty_tracker.models.user import User


@pytest.fixture(autouse=True)
def _keep_test_logging(monkeypatch):
    """main() reconfigures the root logger; leave pytest's capture alone."""
    monkeypatch.setattr(manage, "setup_logging", lambda **kwargs: None)


class TestManageCommands:
    def test_create_user(self, db, capsys):
        assert manage.main(["create-user", "Admin@Example.com", "Secret123"]) == 0
        assert "admin@example.com" in capsys.readouterr().out
        assert db.query(User).filter(User.email == "admin@example.com").count() == 1

    def test_create_user_duplicate_fails(self, db, capsys):
        manage.main(["create-user", "admin@example.com", "Secret123"])
        assert manage.main(["create-user", "admin@example.com", "Secret123"]) == 1
        assert "Email already registered" in capsys.readouterr().err

    def test_create_user_weak_password_lists_fields(self, db, capsys):
        assert manage.main(["create-user", "admin@example.com", "weak"]) == 1
        assert "password:" in capsys.readouterr().err

    def test_list_users(self, db, capsys):
        manage.main(["create-user", "a@example.com", "Secret123"])
        capsys.readouterr()
        assert manage.main(["list-users"]) == 0
        out = capsys.readouterr().out
        assert "a@example.com" in out
        assert "warranties=0" in out

    def test_list_users_empty(self, db, capsys):
        assert manage.main(["list-users"]) == 0
        assert "No users registered" in capsys.readouterr().out

    def test_create_tables(self, db_engine, capsys):
        assert manage.main(["create-tables"]) == 0
        assert "Tables created" in capsys.readouterr().out
