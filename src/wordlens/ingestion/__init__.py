"""WordLens ingestion package — subtitle, PDF and plain-text document loading."""
