import sys

from sales_ingest.cli.ingest_cli import main

sys.exit(main())
