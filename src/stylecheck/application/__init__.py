"""stylecheck application layer: rules, checker service, reporters."""
