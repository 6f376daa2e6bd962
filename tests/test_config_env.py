from sxhkd_view.adapters import config_env


def test_home_read_from_environment(monkeypatch):
    monkeypatch.setenv("HOME", "/home/user")
    assert config_env.load_app_config().home == "/home/user"


def test_empty_home_is_unset(monkeypatch):
    monkeypatch.setenv("HOME", "")
    assert config_env.load_app_config().home is None


def test_debug_flag_overrides_env(monkeypatch):
    monkeypatch.setattr(config_env.env_config, "DEBUG", False)
    assert config_env.load_app_config(debug=True).debug is True
    assert config_env.load_app_config().debug is False


def test_config_path_passed_through():
    assert config_env.load_app_config(config_path="/tmp/sxhkdrc").config_path == "/tmp/sxhkdrc"
