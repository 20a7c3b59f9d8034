from pathlib import Path

import pytest
from pydantic import ValidationError

from inkwell.settings import Settings, choose_env_file


def test_defaults():
    s = Settings()
    assert s.PERMALINK_PATTERN == "/:year/:month/:day/:slug/"
    assert s.DEFAULT_SORT_ORDER == "desc"
    assert s.READING_WPM == 200


def test_content_dir_from_environment(monkeypatch):
    monkeypatch.setenv("CONTENT_DIR", "/srv/blog/content")
    assert Settings().CONTENT_DIR == "/srv/blog/content"


def test_absolute_url_joins_base_url():
    s = Settings(BASE_URL="https://blog.example.com/")
    assert s.absolute_url("/2020/01/29/hello/") == "https://blog.example.com/2020/01/29/hello/"


def test_absolute_url_without_base_url_is_relative():
    assert Settings(BASE_URL="").absolute_url("/x/") == "/x/"


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"


@pytest.mark.parametrize("wpm", [0, -5])
def test_reading_wpm_must_be_positive(wpm):
    with pytest.raises(ValidationError):
        Settings(READING_WPM=wpm)
