"""Constants and markup patterns for the flow engine."""
