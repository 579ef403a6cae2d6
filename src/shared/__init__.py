"""Cross-context building blocks: event contracts, HTTP plumbing, logging and DB setup."""
