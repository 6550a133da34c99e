"""Click commands for recsieve."""
