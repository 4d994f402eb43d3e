"""Services that orchestrate the domain (no printing, no process exit)."""
