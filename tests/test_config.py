import pytest

from firelit import DocumentReference, FirestoreConfig

_ENV = {
    "FIRESTORE_PROJECT_ID": "my-proj",
    "FIRESTORE_PRIVATE_KEY": "-----BEGIN-----\\nabc\\n-----END-----",
    "FIRESTORE_CLIENT_EMAIL": "svc@my-proj.iam.gserviceaccount.com",
}


def test_config_defaults() -> None:
    config = FirestoreConfig(project_id="p", private_key="k", client_email="e")

    assert config.database_id == "(default)"
    assert config.debug is False
    assert config.use_emulator is False
    assert config.emulator_address == "localhost:8080"
    assert config.database_name == "projects/p/databases/(default)"


def test_config_from_env() -> None:
    config = FirestoreConfig.from_env(_ENV)

    assert config.project_id == "my-proj"
    assert config.private_key == "-----BEGIN-----\nabc\n-----END-----"
    assert config.database_id == "(default)"
    assert config.use_emulator is False


def test_config_from_env_with_emulator_and_debug() -> None:
    env = {
        **_ENV,
        "FIRESTORE_EMULATOR_HOST": "127.0.0.1:9090",
        "FIRESTORE_DEBUG": "true",
        "FIRESTORE_DATABASE_ID": "analytics",
    }

    config = FirestoreConfig.from_env(env)

    assert config.use_emulator is True
    assert config.emulator_host == "127.0.0.1"
    assert config.emulator_port == 9090
    assert config.debug is True
    assert config.database_id == "analytics"


def test_config_from_env_reports_missing_variables() -> None:
    with pytest.raises(ValueError, match="FIRESTORE_CLIENT_EMAIL"):
        FirestoreConfig.from_env(
            {"FIRESTORE_PROJECT_ID": "p", "FIRESTORE_PRIVATE_KEY": "k"}
        )


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("FIRESTORE_DEBUG", "maybe", "must be a boolean"),
        ("FIRESTORE_EMULATOR_HOST", "localhost", "host:port"),
        ("FIRESTORE_EMULATOR_HOST", "localhost:http", "integer port"),
        ("FIRESTORE_EMULATOR_HOST", "localhost:70000", "1..65535"),
    ],
)
def test_config_from_env_rejects_bad_values(name: str, value: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        FirestoreConfig.from_env({**_ENV, name: value})


def test_config_builds_references() -> None:
    config = FirestoreConfig(project_id="p", private_key="k", client_email="e")

    ref = config.reference("/cities/LA")
    assert ref == DocumentReference("projects/p/databases/(default)/documents/cities/LA")
    assert ref.project_id == "p"
