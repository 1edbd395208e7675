"""OrgHub command-line interface."""
