"""Summary table of a CSV column, with debug logging of dropped entries."""

import logging
import sys

from descstats.backends.polars.io import CsvColumnSource, engine_from_source
from descstats.core.logging import configure_structlog
from descstats.reporting.summary import SummaryReporter

configure_structlog(logging.DEBUG)

if len(sys.argv) != 3:
    sys.exit("usage: summary_demo.py FILE.csv COLUMN")

engine = engine_from_source(CsvColumnSource(sys.argv[1], sys.argv[2]))
report = SummaryReporter(engine)

print(report.table())
print()
print(report)
