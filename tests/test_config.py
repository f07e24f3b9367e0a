from cdg_client.config import get_settings
from cdg_client.encoder import BASE_URL


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CDG_API_KEY", "env_key")
    monkeypatch.setenv("CDG_LOG_JSON", "true")

    config = get_settings()

    assert config.api_key == "env_key"
    assert config.log_json is True
    assert config.base_url == BASE_URL


def test_settings_from_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CDG_API_KEY", raising=False)
    (tmp_path / ".env").write_text("CDG_API_KEY=file_key\nCDG_BASE_URL=http://localhost/v3/\nOTHER=ignored\n")

    config = get_settings()

    assert config.api_key == "file_key"
    assert config.base_url == "http://localhost/v3/"
