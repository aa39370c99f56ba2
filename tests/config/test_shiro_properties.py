"""
Tests for ShiroBizProperties and KaptchaConfig.
"""
import pytest
from pydantic import ValidationError

from shiro_biz.config import (
    CACHING_SUB_FLAGS,
    KaptchaConfig,
    ShiroBizProperties,
    couple_caching_flags,
)

DERIVED_CHECKS = {
    "AUTHORIZATION_CACHING_ENABLED": "is_authorization_caching_enabled",
    "AUTHENTICATION_CACHING_ENABLED": "is_authentication_caching_enabled",
    "SESSION_CACHING_ENABLED": "is_session_caching_enabled",
}


class TestDefaults:
    """Test default values."""

    def test_time_defaults_are_milliseconds(self, properties):
        assert properties.SESSION_TIMEOUT == 30 * 60 * 1000
        assert properties.SESSION_VALIDATION_INTERVAL == 30 * 1000
        assert properties.CAPTCHA_TIMEOUT == 60 * 1000
        assert ShiroBizProperties.DEFAULT_CAPTCHA_TIMEOUT == 60000
        assert ShiroBizProperties.PREFIX == "shiro"

    def test_default_filter_chain_is_anonymous_ignored_paths(self, properties):
        assert properties.get_filter_chain_definitions() == [
            ("/**/favicon.ico", "anon"),
            ("/assets/**", "anon"),
            ("/webjars/**", "anon"),
        ]

    def test_filter_chain_map_not_shared_between_instances(self):
        first = ShiroBizProperties()
        second = ShiroBizProperties()

        first.FILTER_CHAIN_DEFINITION_MAP["/**"] = "authc"

        assert "/**" not in second.FILTER_CHAIN_DEFINITION_MAP
        assert len(second.FILTER_CHAIN_DEFINITION_MAP) == 3

    def test_flag_and_url_defaults(self, properties):
        assert properties.ENABLED is False
        assert properties.CACHING_ENABLED is False
        assert properties.CAPTCHA_ENABLED is False
        assert properties.CAPTCHA_PARAM_NAME == "captcha"
        assert properties.SESSION_CREATION_ENABLED is True
        assert properties.SESSION_STORAGE_ENABLED is True
        assert properties.SESSION_VALIDATION_SCHEDULER_ENABLED is True
        assert properties.SESSION_MAXIMUM_KICKOUT == 1
        assert properties.RETRY_TIMES_WHEN_ACCESS_DENIED == 3
        assert properties.LOGIN_URL == "/login.jsp"
        assert properties.SUCCESS_URL == "/"
        assert properties.REDIRECT_URL == "/"
        assert properties.UNAUTHORIZED_URL is None
        assert properties.FAILURE_URL is None
        assert properties.DEFAULT_ROLE_PERMISSIONS == {}


class TestCachingFlags:
    """Test coupling between caching sub-flags and CACHING_ENABLED."""

    @pytest.mark.parametrize("flag", CACHING_SUB_FLAGS)
    def test_enabling_sub_flag_enables_master(self, properties, flag):
        setattr(properties, flag, True)

        assert properties.CACHING_ENABLED is True
        assert getattr(properties, DERIVED_CHECKS[flag])() is True

    @pytest.mark.parametrize("flag", CACHING_SUB_FLAGS)
    @pytest.mark.parametrize("master", [True, False])
    def test_disabling_sub_flag_leaves_master_unchanged(self, properties, flag, master):
        properties.CACHING_ENABLED = master

        setattr(properties, flag, False)

        assert properties.CACHING_ENABLED is master
        assert getattr(properties, DERIVED_CHECKS[flag])() is False

    @pytest.mark.parametrize("flag", CACHING_SUB_FLAGS)
    def test_master_flag_can_still_be_turned_off(self, properties, flag):
        setattr(properties, flag, True)
        properties.CACHING_ENABLED = False

        assert getattr(properties, flag) is True
        assert getattr(properties, DERIVED_CHECKS[flag])() is False

    @pytest.mark.parametrize("flag", CACHING_SUB_FLAGS)
    def test_coupling_applies_at_construction(self, flag):
        properties = ShiroBizProperties(**{flag: True})

        assert properties.CACHING_ENABLED is True

    @pytest.mark.parametrize("flag", CACHING_SUB_FLAGS)
    def test_string_false_is_coerced_and_leaves_master_off(self, properties, flag):
        setattr(properties, flag, "false")

        assert getattr(properties, flag) is False
        assert properties.CACHING_ENABLED is False
        assert getattr(properties, DERIVED_CHECKS[flag])() is False

    @pytest.mark.parametrize("flag", CACHING_SUB_FLAGS)
    def test_string_true_is_coerced_and_enables_master(self, properties, flag):
        setattr(properties, flag, "true")

        assert getattr(properties, flag) is True
        assert properties.CACHING_ENABLED is True
        assert getattr(properties, DERIVED_CHECKS[flag])() is True

    def test_invalid_assignment_is_rejected(self, properties):
        with pytest.raises(ValidationError):
            properties.SESSION_CACHING_ENABLED = "maybe"

        assert properties.SESSION_CACHING_ENABLED is False
        assert properties.CACHING_ENABLED is False

    def test_master_alone_does_not_enable_sub_flags(self):
        properties = ShiroBizProperties(CACHING_ENABLED=True)

        assert properties.is_authorization_caching_enabled() is False
        assert properties.is_authentication_caching_enabled() is False
        assert properties.is_session_caching_enabled() is False

    @pytest.mark.parametrize(
        "master,sub_flags,expected",
        [
            (False, (), False),
            (False, (False, False, False), False),
            (False, (False, True, False), True),
            (True, (False, False, False), True),
            (True, (True,), True),
        ],
    )
    def test_couple_caching_flags(self, master, sub_flags, expected):
        assert couple_caching_flags(master, *sub_flags) is expected


class TestBinding:
    """Test binding from SHIRO_* environment variables."""

    def test_scalar_values_from_env(self, monkeypatch):
        monkeypatch.setenv("SHIRO_SESSION_TIMEOUT", "5000")
        monkeypatch.setenv("SHIRO_CAPTCHA_ENABLED", "true")
        monkeypatch.setenv("SHIRO_LOGIN_URL", "/auth/login")

        properties = ShiroBizProperties()

        assert properties.SESSION_TIMEOUT == 5000
        assert properties.CAPTCHA_ENABLED is True
        assert properties.LOGIN_URL == "/auth/login"

    def test_filter_chain_from_env_keeps_order(self, monkeypatch):
        monkeypatch.setenv(
            "SHIRO_FILTER_CHAIN_DEFINITION_MAP",
            '{"/login": "anon", "/admin/**": "authc,roles[admin]", "/**": "authc"}',
        )

        properties = ShiroBizProperties()

        assert [pattern for pattern, _ in properties.get_filter_chain_definitions()] == [
            "/login",
            "/admin/**",
            "/**",
        ]

    def test_sub_flag_from_env_enables_master(self, monkeypatch):
        monkeypatch.setenv("SHIRO_AUTHORIZATION_CACHING_ENABLED", "true")

        properties = ShiroBizProperties()

        assert properties.CACHING_ENABLED is True
        assert properties.is_authorization_caching_enabled() is True

    def test_negative_values_are_not_validated(self):
        properties = ShiroBizProperties(SESSION_TIMEOUT=-1)

        assert properties.SESSION_TIMEOUT == -1


class TestHelpers:
    """Test helper accessors."""

    def test_cache_names_follow_enabled_caches(self, properties):
        assert "authorization" not in properties.get_cache_names()

        properties.AUTHORIZATION_CACHING_ENABLED = True
        properties.CAPTCHA_ENABLED = True
        names = properties.get_cache_names()

        assert names["authorization"] == "shiro-authorizationCache"
        assert names["captcha"] == properties.CAPTCHA_CACHE_NAME
        assert "authentication" not in names

    def test_session_config(self, properties):
        properties.SESSION_CACHING_ENABLED = True

        session = properties.get_session_config()

        assert session["timeout"] == properties.SESSION_TIMEOUT
        assert session["caching_enabled"] is True

    def test_captcha_config(self, properties):
        assert properties.get_captcha_config() == {
            "enabled": False,
            "param_name": "captcha",
            "timeout": 60000,
            "cache_name": "shiro-captchaCache",
        }


class TestKaptchaConfig:
    """Test Kaptcha configuration."""

    def test_defaults(self):
        config = KaptchaConfig()

        assert config.SESSION_KEY == "KAPTCHA_SESSION_KEY"
        assert config.SESSION_DATE == "KAPTCHA_SESSION_DATE"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("KAPTCHA_SESSION_KEY", "captcha:text")

        assert KaptchaConfig().SESSION_KEY == "captcha:text"
