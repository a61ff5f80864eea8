"""Source backed by a HashiCorp Vault KV v2 secret.

The secret is read once at construction and kept as a snapshot, like every
other source. A secret that is missing, forbidden or unreachable leaves the
loader empty; the failure is logged rather than raised so that Vault stays
an optional layer beneath the process environment.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import hvac
from hvac.exceptions import Forbidden, InvalidPath, VaultError
from requests.exceptions import RequestException

from envvars.logger import Logger, default_logger


class VaultLoader:
    """Source reading the key/value pairs of one KV v2 secret.

    Args:
        path: Secret path relative to the mount point (e.g. "myapp/config")
        client: Authenticated ``hvac.Client``; built from ``url``/``token`` if omitted
        url: Vault server URL, used when no client is given
        token: Vault token, used when no client is given
        mount_point: KV v2 mount point (default: "secret")
        logger: Optional logger instance

    Example:
        loader = VaultLoader("myapp/config", url="https://vault:8200", token="hvs.x")
        loader.get("DATABASE_URL")
    """

    def __init__(
        self,
        path: str,
        client: Optional[hvac.Client] = None,
        *,
        url: Optional[str] = None,
        token: Optional[str] = None,
        mount_point: str = "secret",
        logger: Optional[Logger] = None,
    ) -> None:
        self.path = path
        self.mount_point = mount_point
        self.logger = logger or default_logger()
        self._client = client or hvac.Client(url=url, token=token)
        self._values = self._read()

    def _read(self) -> Dict[str, str]:
        try:
            response = self._client.secrets.kv.v2.read_secret_version(
                path=self.path,
                mount_point=self.mount_point,
                raise_on_deleted_version=True,
            )
        except InvalidPath:
            self.logger.debug("Vault secret not found", path=self.path)
            return {}
        except Forbidden:
            self.logger.warning("Permission denied reading Vault secret", path=self.path)
            return {}
        except (VaultError, RequestException) as e:
            self.logger.warning("Failed to read Vault secret", path=self.path, error=str(e))
            return {}

        data: Any = (response or {}).get("data", {}).get("data")
        if not isinstance(data, dict):
            self.logger.debug("Vault secret has no data", path=self.path)
            return {}

        values = {str(key): str(value) for key, value in data.items() if value is not None}
        self.logger.debug("Loaded Vault secret", path=self.path, keys=len(values))
        return values

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    @property
    def values(self) -> Dict[str, str]:
        """Copy of the secret snapshot."""
        return self._values.copy()


__all__ = ["VaultLoader"]
