"""Rule-based rejection categorization and analytics for insurance claims."""
