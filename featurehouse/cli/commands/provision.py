"""Provision command - create or update BigQuery destinations for an import job."""

import sys
from pathlib import Path

import cyclopts
from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import GoogleAuthError

from featurehouse.application.di import create_container
from featurehouse.cli.console import get_console
from featurehouse.config import Config, configure_logging
from featurehouse.domain.shared.error import FeaturehouseError
from featurehouse.domain.warehouse.service.storage import StorageProvisioner, plan_tables
from featurehouse.infrastructure.spec_file import load_import_specs

app = cyclopts.App(name="provision", help="Provision warehouse destinations for an import job")

CREDENTIALS_HINT = "Check credentials and permissions for the target project"


@app.default
def provision(specs_file: Path, /, *, dry_run: bool = False) -> None:
    """Create missing datasets and create or update one table per entity.

    Args:
        specs_file: YAML file with the warehouse storage spec, entities and features.
        dry_run: Print the tables that would be provisioned without calling BigQuery.
    """
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)

    try:
        specs = load_import_specs(specs_file)

        if dry_run:
            for table in plan_tables(specs, default_project=config.bigquery.project):
                console.table_definition(table)
            console.info("Dry run: no changes made")
            return

        container = create_container(config)
        try:
            with container() as uow:
                uow.get(StorageProvisioner).setup_storage(specs)
        finally:
            container.close()

    except FeaturehouseError as e:
        console.error(e.message)
        sys.exit(1)
    except GoogleAPICallError as e:
        console.error(f"BigQuery request failed: {e.message}", hint=CREDENTIALS_HINT)
        sys.exit(1)
    except GoogleAuthError as e:
        console.error(f"BigQuery authentication failed: {e}", hint=CREDENTIALS_HINT)
        sys.exit(1)

    console.success(f"Provisioned {len(specs.entities)} table(s) from {specs_file}")
