import os

from QueryRepair.Utility.env import (
    DEFAULT_MAX_QUERY_LENGTH,
    get_max_query_length,
    get_repo_updater_timeout,
    get_site_admin_tokens,
    load_env_file,
)


def test_load_env_file(tmp_path, monkeypatch):
    env = tmp_path / ".env"
    env.write_text('# comment\nexport QR_A="one"\nQR_B=\'two\'\nQR_EXISTING=new\nnot a pair\n', encoding="utf-8")
    monkeypatch.setenv("QR_EXISTING", "old")
    for name in ("QR_A", "QR_B"):
        # registered so monkeypatch removes them again after the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    load_env_file(str(env))
    assert os.environ["QR_A"] == "one"
    assert os.environ["QR_B"] == "two"
    assert os.environ["QR_EXISTING"] == "old"


def test_missing_env_file_is_ignored(tmp_path):
    load_env_file(str(tmp_path / "missing.env"))


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("MAX_QUERY_LENGTH", "lots")
    monkeypatch.setenv("REPO_UPDATER_TIMEOUT", "soon")
    assert get_max_query_length() == DEFAULT_MAX_QUERY_LENGTH
    assert get_repo_updater_timeout() == 10.0


def test_site_admin_tokens(monkeypatch):
    monkeypatch.delenv("SITE_ADMIN_TOKENS", raising=False)
    assert get_site_admin_tokens() == []
    monkeypatch.setenv("SITE_ADMIN_TOKENS", "a, b")
    assert get_site_admin_tokens() == ["a", "b"]
