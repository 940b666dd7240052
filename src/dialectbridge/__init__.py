"""DialectBridge — SQL dialect translation layer for query pushdown.

The library only creates ``dialectbridge.*`` loggers and never configures
handlers. Applications embedding it call
:func:`dialectbridge.settings.configure_logging` once at start-up to apply
``DIALECTBRIDGE_LOG_LEVEL``.
"""

__version__ = "0.1.0"
