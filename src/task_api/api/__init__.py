"""HTTP interface: routers and per-route authorization rules."""
