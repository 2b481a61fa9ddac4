"""Load ImportSpecs from a YAML spec file."""

from pathlib import Path

import pydantic
import yaml

from featurehouse.domain.shared.error import NotFoundError, ValidationError
from featurehouse.domain.spec.model.spec import ImportSpecs


def load_import_specs(path: Path) -> ImportSpecs:
    """Read and validate a spec file.

    Expected layout::

        warehouse:
          id: warehouse
          type: bigquery
          options:
            datasetId: feast
            projectId: my-project   # optional
        entities:
          - name: driver
        features:
          - name: trips_today
            entity: driver
            value_type: INT64
            description: Trips completed today

    Raises:
        NotFoundError: If the file does not exist.
        ValidationError: If the file cannot be read, is not valid YAML, or does not
            match the models.
    """
    if not path.is_file():
        raise NotFoundError(f"Spec file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Cannot read spec file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"Spec file {path} must contain a mapping at the top level")

    try:
        return ImportSpecs.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid spec file {path}: {e}") from e
