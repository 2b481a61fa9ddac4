"""Custom Dishka scopes for featurehouse."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """featurehouse dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Process lifetime (config, BigQuery client, warehouse adapter)
    - UOW: One provisioning run (CLI command invocation)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
