"""OrgHub CLI commands."""
