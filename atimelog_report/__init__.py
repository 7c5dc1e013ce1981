"""Condensed day, week and month summaries of aTimeLogger exports."""
