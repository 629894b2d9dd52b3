"""Command line tool for targeting Gardener gardens, projects, seeds and shoots."""
