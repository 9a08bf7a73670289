"""Tests for configuration loading."""

from monthgrid.config import Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "monthgrid.conf")
        assert config == Config()
        assert config.max_visible_events == 2

    def test_parses_values(self, tmp_path):
        config_file = tmp_path / "monthgrid.conf"
        config_file.write_text(
            "# monthgrid settings\n"
            'EVENTS_FILE="~/calendar/events.json"  # bundled data\n'
            "EVENTS_URL=https://example.com/events.json # remote\n"
            "MAX_VISIBLE_EVENTS=3\n"
        )

        config = load_config(config_file)

        assert config.events_file == "~/calendar/events.json"
        assert config.events_url == "https://example.com/events.json"
        assert config.max_visible_events == 3

    def test_single_quotes(self, tmp_path):
        config_file = tmp_path / "monthgrid.conf"
        config_file.write_text("events_file='/data/events #1.json'\n")
        assert load_config(config_file).events_file == "/data/events #1.json"

    def test_invalid_int_keeps_default(self, tmp_path, caplog):
        config_file = tmp_path / "monthgrid.conf"
        config_file.write_text("MAX_VISIBLE_EVENTS=lots\n")

        config = load_config(config_file)

        assert config.max_visible_events == 2
        assert "MAX_VISIBLE_EVENTS" in caplog.text

    def test_negative_limit_keeps_default(self, tmp_path, caplog):
        config_file = tmp_path / "monthgrid.conf"
        config_file.write_text("MAX_VISIBLE_EVENTS=-1\n")

        config = load_config(config_file)

        assert config.max_visible_events == 2
        assert "MAX_VISIBLE_EVENTS" in caplog.text

    def test_zero_limit_allowed(self, tmp_path):
        config_file = tmp_path / "monthgrid.conf"
        config_file.write_text("MAX_VISIBLE_EVENTS=0\n")
        assert load_config(config_file).max_visible_events == 0

    def test_ignores_noise(self, tmp_path):
        config_file = tmp_path / "monthgrid.conf"
        config_file.write_text("\nnot a setting\nUNKNOWN_KEY=1\n")
        assert load_config(config_file) == Config()
