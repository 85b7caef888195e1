import sys

from github_summary.main import main

sys.exit(main())
