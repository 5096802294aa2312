"""
Property loading (config.py)

Tests PropertiesLoader sources and merge order.
"""

import json

import pytest

from authconf.config import PropertiesLoader, flatten
from authconf.faults import ConfigInvalidFault, ConfigMissingFault
from authconf.properties import Properties


# ============================================================================
# Files
# ============================================================================

class TestFileSources:

    def test_properties_file(self, properties_file):
        path = properties_file({"cas.loginUrl.0": "https://cas/login", "anonymous": "true"})
        props = PropertiesLoader.load(paths=[str(path)])
        assert isinstance(props, Properties)
        assert props.get("cas.loginUrl", 0) == "https://cas/login"
        assert props.get("anonymous") == "true"

    def test_properties_file_comments(self, tmp_path):
        path = tmp_path / "auth.properties"
        path.write_text("# CAS\ncas.loginUrl.0=https://cas/login\n\nfacebook.id = fbId\n")
        props = PropertiesLoader.load(paths=[str(path)])
        assert props.get("facebook.id") == "fbId"
        assert len(props) == 2

    def test_json_file(self, tmp_path):
        path = tmp_path / "auth.json"
        path.write_text(json.dumps({
            "cas": {"loginUrl": ["https://cas-a/login", "https://cas-b/login"]},
            "anonymous": True,
            "ldap": {"connectTimeout": {"0": 500}},
        }))
        props = PropertiesLoader.load(paths=[str(path)])
        assert props.get("cas.loginUrl", 1) == "https://cas-b/login"
        assert props.get("anonymous") == "true"
        assert props.get("ldap.connectTimeout", 0) == "500"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "auth.yaml"
        path.write_text(
            "oidc:\n"
            "  id:\n"
            "    - client-a\n"
            "  secret:\n"
            "    - secret-a\n"
            "facebook.id: fbId\n"
        )
        props = PropertiesLoader.load(paths=[str(path)])
        assert props.get("oidc.id", 0) == "client-a"
        assert props.get("facebook.id") == "fbId"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert len(PropertiesLoader.load(paths=[str(path)])) == 0

    def test_later_file_wins(self, tmp_path, properties_file):
        first = properties_file({"cas.loginUrl.0": "https://old/login"}, name="a.properties")
        second = tmp_path / "b.yaml"
        second.write_text("cas.loginUrl.0: https://new/login\n")
        props = PropertiesLoader.load(paths=[str(first), str(second)])
        assert props.get("cas.loginUrl", 0) == "https://new/login"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigMissingFault):
            PropertiesLoader.load(paths=[str(tmp_path / "nope.properties")])

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "auth.xml"
        path.write_text("<x/>")
        with pytest.raises(ConfigInvalidFault):
            PropertiesLoader.load(paths=[str(path)])

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "auth.json"
        path.write_text("{not json")
        with pytest.raises(ConfigInvalidFault):
            PropertiesLoader.load(paths=[str(path)])

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "auth.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigInvalidFault):
            PropertiesLoader.load(paths=[str(path)])


# ============================================================================
# Environment / overrides
# ============================================================================

class TestEnvironmentSources:

    def test_env_variables(self, monkeypatch):
        monkeypatch.setenv("AUTHCONF_cas__loginUrl__0", "https://cas/login")
        props = PropertiesLoader.load()
        assert props.get("cas.loginUrl", 0) == "https://cas/login"

    def test_env_overrides_file(self, monkeypatch, properties_file):
        path = properties_file({"cas.loginUrl.0": "https://file/login"})
        monkeypatch.setenv("AUTHCONF_cas__loginUrl__0", "https://env/login")
        props = PropertiesLoader.load(paths=[str(path)])
        assert props.get("cas.loginUrl", 0) == "https://env/login"

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_anonymous", "true")
        props = PropertiesLoader.load(env_prefix="MYAPP_")
        assert props.get("anonymous") == "true"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("AUTHCONF_anonymous=true\nOTHER=ignored\n")
        props = PropertiesLoader.load(env_file=str(env_file))
        assert props.get("anonymous") == "true"
        assert "OTHER" not in props

    def test_env_beats_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("AUTHCONF_facebook__id=from-file\n")
        monkeypatch.setenv("AUTHCONF_facebook__id", "from-env")
        props = PropertiesLoader.load(env_file=str(env_file))
        assert props.get("facebook.id") == "from-env"

    def test_missing_env_file_skipped(self, tmp_path):
        props = PropertiesLoader.load(env_file=str(tmp_path / "missing.env"))
        assert len(props) == 0

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("AUTHCONF_anonymous", "true")
        props = PropertiesLoader.load(overrides={"anonymous": False, "rest.url.0": "https://auth/check"})
        assert props.get("anonymous") == "false"
        assert props.get("rest.url", 0) == "https://auth/check"


# ============================================================================
# flatten
# ============================================================================

class TestFlatten:

    def test_nested(self):
        assert flatten({"db": {"jdbcUrl": {"0": "jdbc:h2:mem"}}}) == {"db.jdbcUrl.0": "jdbc:h2:mem"}

    def test_lists_become_indices(self):
        assert flatten({"a": ["x", None, "z"]}) == {"a.0": "x", "a.2": "z"}

    def test_none_dropped(self):
        assert flatten({"a": None, "b": 1}) == {"b": 1}
