"""Tests for spec file loading and the provision CLI command."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import Forbidden
from google.auth.exceptions import DefaultCredentialsError

from featurehouse.cli.commands import provision as provision_cmd
from featurehouse.domain.shared.error import NotFoundError, ValidationError
from featurehouse.domain.spec.model.value_type import ValueType
from featurehouse.infrastructure.spec_file import load_import_specs

SPECS_YAML = """\
warehouse:
  id: warehouse
  type: bigquery
  options:
    datasetId: feast
entities:
  - name: driver
features:
  - name: trips_today
    entity: driver
    value_type: int64
  - name: rating
    entity: driver
    value_type: DOUBLE
    description: Average rating
"""


@pytest.fixture
def specs_file(tmp_path: Path) -> Path:
    path = tmp_path / "specs.yaml"
    path.write_text(SPECS_YAML)
    return path


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(provision_cmd, "configure_logging", lambda config: None)
    monkeypatch.delenv("FEATUREHOUSE_CONFIG_FILE", raising=False)
    monkeypatch.delenv("FEATUREHOUSE_BIGQUERY__PROJECT", raising=False)


def _mock_container() -> tuple[MagicMock, MagicMock]:
    container = MagicMock()
    storage = container.return_value.__enter__.return_value.get.return_value
    return container, storage


class TestLoadImportSpecs:
    def test_loads_specs(self, specs_file: Path):
        specs = load_import_specs(specs_file)

        assert specs.warehouse.options == {"datasetId": "feast"}
        assert [e.name for e in specs.entities] == ["driver"]
        assert [f.value_type for f in specs.features] == [ValueType.INT64, ValueType.DOUBLE]
        assert specs.features[1].description == "Average rating"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(NotFoundError):
            load_import_specs(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("warehouse: [unclosed\n")

        with pytest.raises(ValidationError, match="Invalid YAML"):
            load_import_specs(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValidationError, match="mapping"):
            load_import_specs(path)

    def test_model_errors_are_reported(self, tmp_path: Path):
        path = tmp_path / "nowarehouse.yaml"
        path.write_text("entities:\n  - name: driver\n")

        with pytest.raises(ValidationError, match="Invalid spec file"):
            load_import_specs(path)

    def test_undecodable_file_is_reported(self, tmp_path: Path):
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"warehouse:\n  id: \xff\xfe\n")

        with pytest.raises(ValidationError, match="Cannot read spec file"):
            load_import_specs(path)


class TestProvisionCommand:
    def test_provisions_through_container(self, specs_file: Path, monkeypatch: pytest.MonkeyPatch):
        container, storage = _mock_container()
        monkeypatch.setattr(provision_cmd, "create_container", lambda config: container)

        provision_cmd.provision(specs_file)

        storage.setup_storage.assert_called_once_with(load_import_specs(specs_file))
        container.close.assert_called_once()

    def test_dry_run_does_not_touch_warehouse(
        self, specs_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ):
        monkeypatch.setenv("FEATUREHOUSE_BIGQUERY__PROJECT", "my-project")
        create_container = MagicMock()
        monkeypatch.setattr(provision_cmd, "create_container", create_container)

        provision_cmd.provision(specs_file, dry_run=True)

        create_container.assert_not_called()
        out = capsys.readouterr().out
        assert "my-project.feast.driver" in out
        assert "trips_today" in out
        assert "event_timestamp" in out

    def test_warehouse_error_exits_nonzero(
        self, specs_file: Path, monkeypatch: pytest.MonkeyPatch
    ):
        container, storage = _mock_container()
        storage.setup_storage.side_effect = Forbidden("Access Denied")
        monkeypatch.setattr(provision_cmd, "create_container", lambda config: container)

        with pytest.raises(SystemExit) as exc_info:
            provision_cmd.provision(specs_file)

        assert exc_info.value.code == 1
        container.close.assert_called_once()

    def test_missing_spec_file_exits_nonzero(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            provision_cmd.provision(tmp_path / "absent.yaml")

        assert exc_info.value.code == 1

    def test_undecodable_spec_file_exits_nonzero(self, tmp_path: Path):
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"warehouse:\n  id: \xff\xfe\n")

        with pytest.raises(SystemExit) as exc_info:
            provision_cmd.provision(path)

        assert exc_info.value.code == 1

    def test_missing_credentials_exit_nonzero(
        self, specs_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ):
        container = MagicMock()
        container.return_value.__enter__.return_value.get.side_effect = DefaultCredentialsError(
            "Your default credentials were not found"
        )
        monkeypatch.setattr(provision_cmd, "create_container", lambda config: container)

        with pytest.raises(SystemExit) as exc_info:
            provision_cmd.provision(specs_file)

        assert exc_info.value.code == 1
        assert provision_cmd.CREDENTIALS_HINT in capsys.readouterr().err
        container.close.assert_called_once()
