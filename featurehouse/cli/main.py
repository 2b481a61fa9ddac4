"""Main CLI application using Cyclopts."""

import cyclopts

from featurehouse.cli.commands import provision

app = cyclopts.App(
    name="featurehouse",
    help="Provision BigQuery destinations for feature ingestion",
)

app.command(provision.app, name="provision")
