import sys

from devtools_mcp.cli import main

sys.exit(main())
