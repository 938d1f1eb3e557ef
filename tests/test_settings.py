import os

from config.settings import Settings


def test_development_layout_and_open_cors():
    s = Settings(ENVIRONMENT="development", CORS_ORIGINS="https://a.example")
    assert s.data_file == os.path.join(os.getcwd(), "server", "data", "db.json")
    assert s.upload_dir == os.path.join(os.getcwd(), "server", "uploads")
    assert s.cors_origins() == ["*"]


def test_production_layout_and_allow_list():
    s = Settings(ENVIRONMENT="production", CORS_ORIGINS=" https://a.example, https://b.example ,")
    assert s.data_dir == os.path.join(os.getcwd(), "data")
    assert s.upload_dir == os.path.join(os.getcwd(), "uploads")
    assert s.cors_origins() == ["https://a.example", "https://b.example"]


def test_production_without_allow_list_is_open():
    assert Settings(ENVIRONMENT="production", CORS_ORIGINS="").cors_origins() == ["*"]
