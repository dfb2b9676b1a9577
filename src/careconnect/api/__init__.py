"""HTTP API for careconnect."""
