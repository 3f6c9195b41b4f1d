"""Contains the name for the logger of finitediff modules.

``finitediff`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
The comparators report every mismatching entry at level ``DEBUG``; nothing is
displayed unless the calling application enables it.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``finitediff.logger.finitediff_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "finitediff"
finitediff_logger = logging.getLogger(logger_name)
