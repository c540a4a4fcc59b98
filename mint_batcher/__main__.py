import sys

from mint_batcher.orchestrator.runner import main

sys.exit(main())
