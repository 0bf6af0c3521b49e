"""Console, entropy and plotting helpers used by the CLI and reports."""
