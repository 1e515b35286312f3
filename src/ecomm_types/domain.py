"""Domain initialization.

Logging is left to the application: call
``ecomm_types.utils.logging.configure_logging()`` from an entry point if
the structlog setup used here is wanted.
"""

from protean.domain import Domain

# Domain Composition Root
ecomm_types = Domain(name="ecomm_types")
