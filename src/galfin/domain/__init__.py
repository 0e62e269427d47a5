"""Domain layer: budgeting records and accuracy analytics."""
