"""
Main entrypoint: timed batch NFT mint.

Loads PRIVATE_KEY_* accounts from the environment (.env supported), prepares one
mint transaction per account, waits for MINT_TIME and submits all of them at once.

Env: PRIVATE_KEY_<n>, MINT_TIME, TEST_MODE, SUI_NETWORK, SUI_RPC_URL, NFT_PACKAGE_ID, ...

Balances only: python -m mint_batcher.tools.check_balances
"""

import sys

from mint_batcher.orchestrator.runner import main

if __name__ == "__main__":
    sys.exit(main())
