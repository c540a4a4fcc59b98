# Mint run orchestration.

from mint_batcher.orchestrator.runner import load_accounts, main, run_mint, submit_all

__all__ = ["load_accounts", "main", "run_mint", "submit_all"]
