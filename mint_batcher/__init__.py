"""
Mint Batcher — timed batch NFT mint submitter for the Sui network.

Loads account keys from the environment, prepares one mint transaction per
account ahead of time, waits for the configured mint instant and then submits
every transaction at once with bounded per-account retry.
"""

__version__ = "0.1.0"
