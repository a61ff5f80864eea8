"""Tests for VaultLoader with a mocked hvac client."""

from unittest.mock import MagicMock, patch

import pytest
from hvac.exceptions import Forbidden, InvalidPath, VaultDown
from requests.exceptions import ConnectionError as RequestsConnectionError

from envvars.loaders import PriorityLoader, SourceLoader, VaultLoader


def make_client(data=None, error=None) -> MagicMock:
    client = MagicMock()
    read = client.secrets.kv.v2.read_secret_version
    if error is not None:
        read.side_effect = error
    else:
        read.return_value = {"data": {"data": data, "metadata": {"version": 1}}}
    return client


class TestVaultLoaderRead:
    """Tests for reading a secret snapshot."""

    def test_reads_secret_values(self):
        client = make_client({"DATABASE_URL": "postgres://db", "WORKERS": "4"})
        loader = VaultLoader("myapp/config", client)

        assert loader.get("DATABASE_URL") == "postgres://db"
        assert loader.get("WORKERS") == "4"
        assert loader.get("MISSING") is None

    def test_reads_from_mount_point(self):
        client = make_client({})
        VaultLoader("myapp/config", client, mount_point="kv")

        client.secrets.kv.v2.read_secret_version.assert_called_once_with(
            path="myapp/config",
            mount_point="kv",
            raise_on_deleted_version=True,
        )

    def test_values_are_coerced_to_strings(self):
        """Non-string secret values become strings; nulls are dropped."""
        client = make_client({"PORT": 8080, "DEBUG": True, "UNSET": None})
        loader = VaultLoader("app", client)
        assert loader.values == {"PORT": "8080", "DEBUG": "True"}

    def test_secret_read_once(self):
        """The secret is a snapshot taken at construction."""
        client = make_client({"A": "1"})
        loader = VaultLoader("app", client)
        loader.get("A")
        loader.get("B")
        assert client.secrets.kv.v2.read_secret_version.call_count == 1

    def test_is_source_loader(self):
        assert isinstance(VaultLoader("app", make_client({})), SourceLoader)

    def test_builds_client_from_url_and_token(self):
        with patch("envvars.loaders.vault.hvac.Client") as client_cls:
            client_cls.return_value = make_client({"A": "1"})
            loader = VaultLoader("app", url="https://vault:8200", token="hvs.test")

        client_cls.assert_called_once_with(url="https://vault:8200", token="hvs.test")
        assert loader.get("A") == "1"


class TestVaultLoaderDegradation:
    """Failures leave the loader empty instead of raising."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidPath("no such secret"),
            Forbidden("denied"),
            VaultDown("sealed"),
            RequestsConnectionError("unreachable"),
        ],
    )
    def test_errors_yield_empty_source(self, error):
        loader = VaultLoader("app", make_client(error=error))
        assert loader.values == {}
        assert loader.get("A") is None

    def test_response_without_data(self):
        client = MagicMock()
        client.secrets.kv.v2.read_secret_version.return_value = {"data": {}}
        assert VaultLoader("app", client).values == {}

    def test_failure_is_logged(self):
        logger = MagicMock()
        VaultLoader("app", make_client(error=Forbidden("denied")), logger=logger)
        logger.warning.assert_called_once()

    def test_unexpected_errors_propagate(self):
        """Programming errors are not mistaken for an unavailable Vault."""
        with pytest.raises(TypeError):
            VaultLoader("app", make_client(error=TypeError("bad call")))


class TestVaultInPriorityStack:
    def test_environment_overrides_vault(self):
        vault = VaultLoader("app", make_client({"A": "vault", "B": "vault"}))
        loader = PriorityLoader([{"A": "env"}, vault])
        assert loader.get("A") == "env"
        assert loader.get("B") == "vault"
