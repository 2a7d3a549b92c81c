"""Static data tables for case-study generation."""
