"""Users module - admin accounts that can sign in to the admin area."""
