import sys

from i18n_scan.tools.scan import main

sys.exit(main())
