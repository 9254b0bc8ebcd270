"""Command-line interface for nuget-warden."""
