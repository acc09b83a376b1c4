"""Unit tests for the project settings module."""

import importlib

import CommunityHelp.settings as project_settings


class TestSettingsDefaults:
    """Values used when the environment leaves a setting unset."""

    def test_debug_off_and_hosts_explicit_by_default(self, monkeypatch) -> None:
        monkeypatch.delenv("DJANGO_DEBUG", raising=False)
        monkeypatch.delenv("DJANGO_ALLOWED_HOSTS", raising=False)

        module = importlib.reload(project_settings)

        assert module.DEBUG is False
        assert module.ALLOWED_HOSTS == ["localhost", "127.0.0.1"]
        assert "*" not in module.ALLOWED_HOSTS

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("DJANGO_DEBUG", "True")
        monkeypatch.setenv("DJANGO_ALLOWED_HOSTS", "help.example.com,api.example.com")

        module = importlib.reload(project_settings)

        assert module.DEBUG is True
        assert module.ALLOWED_HOSTS == ["help.example.com", "api.example.com"]
