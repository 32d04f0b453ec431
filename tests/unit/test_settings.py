"""Unit tests for ScraperSettings and selector config loading."""

import pytest
from pydantic import ValidationError

from profile_scraper.config.selectors import (
    DEFAULT_SELECTORS_PATH,
    FieldSelector,
    SectionSelectors,
    load_selector_config,
)
from profile_scraper.config.settings import DEFAULT_USER_AGENT, ScraperSettings
from profile_scraper.models.raw import Section


# ---------------------------------------------------------------------------
# ScraperSettings
# ---------------------------------------------------------------------------


class TestScraperSettings:
    def test_loads_cookie_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LINKEDIN_SCRAPER_SESSION_COOKIE_VALUE", "AQEDcookie")

        settings = ScraperSettings()

        assert settings.session_cookie_value == "AQEDcookie"

    def test_defaults_are_correct(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LINKEDIN_SCRAPER_SESSION_COOKIE_VALUE", "c")

        settings = ScraperSettings()

        assert settings.session_cookie_name == "li_at"
        assert settings.session_cookie_domain == ".linkedin.com"
        assert settings.login_url == "https://www.linkedin.com/login"
        assert settings.profile_domain == "linkedin.com/"
        assert settings.keep_alive is False
        assert settings.headless is True
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.timeout_ms == 30000
        assert settings.content_wait_timeout_ms == 10000
        assert settings.settle_delay_ms == 2000
        assert settings.scroll_distance_px == 300
        assert settings.scroll_interval_ms == 150
        assert settings.max_scrolls == 100
        assert settings.timezone is None
        assert settings.selectors_path is None
        assert settings.log_level == "INFO"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LINKEDIN_SCRAPER_SESSION_COOKIE_VALUE", "c")
        monkeypatch.setenv("LINKEDIN_SCRAPER_KEEP_ALIVE", "true")
        monkeypatch.setenv("LINKEDIN_SCRAPER_TIMEOUT_MS", "45000")
        monkeypatch.setenv("LINKEDIN_SCRAPER_TIMEZONE", "Europe/Amsterdam")

        settings = ScraperSettings()

        assert settings.keep_alive is True
        assert settings.timeout_ms == 45000
        assert settings.timezone == "Europe/Amsterdam"

    def test_missing_cookie_fails(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("LINKEDIN_SCRAPER_SESSION_COOKIE_VALUE", raising=False)

        with pytest.raises(ValidationError):
            ScraperSettings()

    def test_empty_cookie_fails(self):
        with pytest.raises(ValidationError):
            ScraperSettings(session_cookie_value="")

    def test_timeout_lower_bound(self):
        with pytest.raises(ValidationError):
            ScraperSettings(session_cookie_value="c", timeout_ms=10)

    def test_frozen(self, settings: ScraperSettings):
        with pytest.raises(ValidationError):
            settings.keep_alive = True

    def test_model_copy_overrides(self, settings: ScraperSettings):
        assert settings.model_copy(update={"keep_alive": True}).keep_alive is True
        assert settings.keep_alive is False


# ---------------------------------------------------------------------------
# Selector config
# ---------------------------------------------------------------------------


class TestFieldSelector:
    def test_string_shorthand(self):
        assert FieldSelector.model_validate("h3") == FieldSelector(css="h3")

    def test_mapping(self):
        link = FieldSelector.model_validate({"css": "img", "attribute": "src", "index": 2})
        assert (link.css, link.attribute, link.index) == ("img", "src", 2)

    def test_invalid_css_rejected(self):
        with pytest.raises(ValidationError, match="Invalid CSS selector"):
            FieldSelector.model_validate("div[")

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            FieldSelector(css="span", index=-1)


class TestLoadSelectorConfig:
    def test_packaged_defaults(self):
        config = load_selector_config()
        assert set(config.sections) == set(Section)
        experience = config.for_section(Section.EXPERIENCE)
        assert experience.nodes[0] == 'section[data-section="experience"] ul li'
        assert [link.css for link in experience.chain("title")][:2] == [
            'div[data-field="title"]',
            ".mr1.t-bold span",
        ]

    def test_experience_location_and_dates_use_different_matches(self):
        experience = load_selector_config().for_section(Section.EXPERIENCE)
        shared = ".t-14.t-black--light.t-normal"
        location = next(link for link in experience.chain("location") if link.css == shared)
        dates = next(link for link in experience.chain("date_range") if link.css == shared)
        assert (dates.index, location.index) == (0, 1)

    def test_identity_photo_reads_src(self):
        identity = load_selector_config().for_section(Section.IDENTITY)
        assert all(link.attribute == "src" for link in identity.chain("photo"))

    def test_unknown_field_has_empty_chain(self):
        assert load_selector_config().for_section(Section.SKILLS).chain("nope") == []

    def test_custom_file(self, tmp_path):
        path = tmp_path / "selectors.yaml"
        path.write_text(
            "sections:\n"
            "  skills:\n"
            "    nodes: ['.skills li']\n"
            "    fields:\n"
            "      skill_name: ['.name']\n",
            encoding="utf-8",
        )

        config = load_selector_config(str(path))

        assert config.for_section(Section.SKILLS).nodes == [".skills li"]
        assert config.for_section(Section.EXPERIENCE) == SectionSelectors()

    def test_missing_file_falls_back(self, tmp_path, caplog: pytest.LogCaptureFixture):
        config = load_selector_config(str(tmp_path / "missing.yaml"))
        assert config == load_selector_config()
        assert "not found" in caplog.text

    def test_invalid_yaml_falls_back(self, tmp_path, caplog: pytest.LogCaptureFixture):
        path = tmp_path / "broken.yaml"
        path.write_text("sections: [unclosed\n", encoding="utf-8")
        assert load_selector_config(str(path)) == load_selector_config()
        assert "Failed to parse" in caplog.text

    def test_invalid_selector_falls_back(self, tmp_path, caplog: pytest.LogCaptureFixture):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "sections:\n  skills:\n    nodes: ['li[']\n", encoding="utf-8"
        )
        assert load_selector_config(str(path)) == load_selector_config()
        assert "Invalid selectors config" in caplog.text

    def test_unknown_section_falls_back(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("sections:\n  hobbies:\n    nodes: ['li']\n", encoding="utf-8")
        assert load_selector_config(str(path)) == load_selector_config()

    def test_default_path_is_packaged(self):
        assert DEFAULT_SELECTORS_PATH.name == "selectors.yaml"
        assert DEFAULT_SELECTORS_PATH.exists()
