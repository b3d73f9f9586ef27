from __future__ import annotations

import os
from collections.abc import Mapping

import chz

from .reference import DocumentReference

DEFAULT_DATABASE_ID = "(default)"
DEFAULT_EMULATOR_HOST = "localhost"
DEFAULT_EMULATOR_PORT = 8080

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_port(name: str, raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer port, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"{name} must be within 1..65535, got {port}")
    return port


def _split_emulator_host(raw: str) -> tuple[str, int]:
    host, sep, port = raw.rpartition(":")
    if not sep or not host:
        raise ValueError(f"FIRESTORE_EMULATOR_HOST must be 'host:port', got {raw!r}")
    return host, _parse_port("FIRESTORE_EMULATOR_HOST", port)


@chz.chz
class FirestoreConfig:
    """Connection settings for a Firestore database.

    Only carried through by firelit; nothing here opens a connection.
    """

    project_id: str
    private_key: str
    client_email: str
    database_id: str = DEFAULT_DATABASE_ID
    debug: bool = False
    use_emulator: bool = False
    emulator_host: str = DEFAULT_EMULATOR_HOST
    emulator_port: int = DEFAULT_EMULATOR_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FirestoreConfig:
        """Build a config from ``FIRESTORE_*`` environment variables.

        ``FIRESTORE_EMULATOR_HOST`` (``host:port``) switches on emulator use.
        """

        env = os.environ if environ is None else environ
        missing = [
            name
            for name in (
                "FIRESTORE_PROJECT_ID",
                "FIRESTORE_PRIVATE_KEY",
                "FIRESTORE_CLIENT_EMAIL",
            )
            if not env.get(name)
        ]
        if missing:
            raise ValueError(f"missing environment variables: {', '.join(missing)}")

        emulator_host = DEFAULT_EMULATOR_HOST
        emulator_port = DEFAULT_EMULATOR_PORT
        use_emulator = False
        if raw_emulator := env.get("FIRESTORE_EMULATOR_HOST"):
            emulator_host, emulator_port = _split_emulator_host(raw_emulator)
            use_emulator = True

        return cls(
            project_id=env["FIRESTORE_PROJECT_ID"],
            # Keys pasted into env files usually carry escaped newlines.
            private_key=env["FIRESTORE_PRIVATE_KEY"].replace("\\n", "\n"),
            client_email=env["FIRESTORE_CLIENT_EMAIL"],
            database_id=env.get("FIRESTORE_DATABASE_ID") or DEFAULT_DATABASE_ID,
            debug=_parse_bool("FIRESTORE_DEBUG", env.get("FIRESTORE_DEBUG", "")),
            use_emulator=use_emulator,
            emulator_host=emulator_host,
            emulator_port=emulator_port,
        )

    @property
    def database_name(self) -> str:
        return f"projects/{self.project_id}/databases/{self.database_id}"

    @property
    def emulator_address(self) -> str:
        return f"{self.emulator_host}:{self.emulator_port}"

    def reference(self, document_path: str) -> DocumentReference:
        return DocumentReference.from_parts(
            self.project_id, self.database_id, document_path.strip("/")
        )


__all__ = ["FirestoreConfig"]
