"""Data models for KubeDeploy TUI."""
