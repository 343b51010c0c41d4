"""CLI commands for TenantGate."""
