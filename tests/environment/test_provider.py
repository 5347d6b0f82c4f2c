"""Tests for environment providers."""

import json

import pytest

from possum_app.config.defaults import EnvironmentParams
from possum_app.environment.models import ServiceBinding
from possum_app.environment.provider import (
    CloudFoundryEnvironment,
    StaticEnvironment,
    _BindingEnvironment,
)
from possum_app.errors import EnvironmentUnavailable, TypeMismatch


class TestCloudFoundryEnvironment:
    """Test reading bindings from VCAP variables."""

    def test_passel(self, vcap_environ):
        env = CloudFoundryEnvironment(environ=vcap_environ)
        assert env.passel().members == ("north", "south")

    def test_connection_info(self, vcap_environ):
        env = CloudFoundryEnvironment(environ=vcap_environ)
        info = env.connection_info()
        assert info.to_dsn() == "possum:hunter2@tcp(db.internal:3306)/possumdb"

    def test_basic_auth(self, vcap_environ):
        env = CloudFoundryEnvironment(environ=vcap_environ)
        assert env.basic_auth_username() == "ranger"
        assert env.basic_auth_password() == "s3cret"

    def test_basic_auth_absent(self):
        services = {"user-provided": [{"name": "possum", "credentials": {"passel": []}}]}
        env = CloudFoundryEnvironment(environ={"VCAP_SERVICES": json.dumps(services)})

        assert env.basic_auth_username() == ""
        assert env.basic_auth_password() == ""

    def test_application_uris(self, vcap_environ):
        env = CloudFoundryEnvironment(environ=vcap_environ)
        assert env.application_uris() == [
            "possum.apps.example.com",
            "possum-alt.apps.example.com",
        ]

    def test_application_uris_fallback(self):
        """Older platforms publish uris instead of application_uris."""
        env = CloudFoundryEnvironment(environ={
            "VCAP_APPLICATION": json.dumps({"uris": ["legacy.example.com"]}),
        })
        assert env.application_uris() == ["legacy.example.com"]

    def test_application_uris_wrong_type(self):
        env = CloudFoundryEnvironment(environ={
            "VCAP_APPLICATION": json.dumps({"application_uris": "one.example.com"}),
        })
        with pytest.raises(TypeMismatch):
            env.application_uris()

    def test_missing_vcap_services(self):
        env = CloudFoundryEnvironment(environ={})
        with pytest.raises(EnvironmentUnavailable) as exc_info:
            env.passel()
        assert exc_info.value.context == {"variable": "VCAP_SERVICES"}

    def test_invalid_json(self):
        env = CloudFoundryEnvironment(environ={"VCAP_SERVICES": "{not json"})
        with pytest.raises(EnvironmentUnavailable):
            env.connection_info()

    def test_missing_service(self, vcap_environ):
        params = EnvironmentParams(db_service_name="other-db")
        env = CloudFoundryEnvironment(environ=vcap_environ, params=params)

        with pytest.raises(EnvironmentUnavailable) as exc_info:
            env.connection_info()
        assert exc_info.value.service_name == "other-db"

    def test_malformed_passel(self):
        services = {"user-provided": [{"name": "possum", "credentials": {"passel": ["a", 42]}}]}
        env = CloudFoundryEnvironment(environ={"VCAP_SERVICES": json.dumps(services)})

        with pytest.raises(TypeMismatch):
            env.passel()

    @pytest.mark.parametrize("credentials", ["oops", ["north"], 42])
    @pytest.mark.parametrize("lookup", ["passel", "connection_info", "basic_auth_username"])
    def test_credentials_not_an_object(self, credentials, lookup):
        services = {
            "user-provided": [
                {"name": "possum", "credentials": credentials},
                {"name": "possum-db", "credentials": credentials},
            ]
        }
        env = CloudFoundryEnvironment(environ={"VCAP_SERVICES": json.dumps(services)})

        with pytest.raises(TypeMismatch) as exc_info:
            getattr(env, lookup)()

        assert exc_info.value.field == "credentials"
        assert exc_info.value.expected == "object"
        assert exc_info.value.actual == type(credentials).__name__

    def test_null_credentials_are_empty(self):
        services = {"user-provided": [{"name": "possum", "credentials": None}]}
        env = CloudFoundryEnvironment(environ={"VCAP_SERVICES": json.dumps(services)})

        assert env.basic_auth_username() == ""
        with pytest.raises(TypeMismatch):
            env.passel()

    def test_reads_os_environ_by_default(self, monkeypatch, vcap_environ):
        for key, value in vcap_environ.items():
            monkeypatch.setenv(key, value)

        env = CloudFoundryEnvironment()
        assert env.passel().members == ("north", "south")


class TestStaticEnvironment:
    """Test the in-memory provider."""

    def test_lookups(self, static_env):
        assert static_env.passel().members == ("north", "south")
        assert static_env.connection_info().host == "db.internal"
        assert static_env.basic_auth_username() == "ranger"
        assert static_env.application_uris() == ["possum.apps.example.com"]

    def test_missing_service(self):
        env = StaticEnvironment()
        with pytest.raises(EnvironmentUnavailable):
            env.passel()

    def test_credentials_not_an_object(self):
        env = StaticEnvironment(services={"possum": ["north", "south"]})
        with pytest.raises(TypeMismatch) as exc_info:
            env.passel()
        assert exc_info.value.actual == "list"


class TestBindingEnvironmentInterface:
    """Test that providers must implement the binding lookups."""

    def test_incomplete_provider_cannot_be_created(self):
        class HalfEnvironment(_BindingEnvironment):
            def service(self, name):
                return ServiceBinding(name=name)

        with pytest.raises(TypeError):
            HalfEnvironment()
